from werkzeug.exceptions import NotFound

from models import Expense, db
from services.periods import in_month, total_amount


def create_expense(user_id, amount, date, category=None, description=None):
    expense = Expense(amount=amount, date=date, category=category,
                      description=description, user_id=user_id)
    db.session.add(expense)
    db.session.commit()
    return expense


def list_expenses(user_id):
    return (Expense.query.filter_by(user_id=user_id)
            .order_by(Expense.date.desc(), Expense.id.desc())
            .all())


def expenses_by_category(user_id, category):
    pattern = f"%{category}%"
    expenses = (Expense.query.filter(Expense.user_id == user_id, Expense.category.ilike(pattern))
                .order_by(Expense.date.desc(), Expense.id.desc())
                .all())
    if not expenses:
        raise NotFound(f'No expenses found for category "{category}" for user with ID {user_id}')
    return expenses


def expenses_for_month(user_id, year, month):
    expenses = (Expense.query.filter(Expense.user_id == user_id, *in_month(Expense.date, year, month))
                .order_by(Expense.date.desc(), Expense.id.desc())
                .all())
    if not expenses:
        raise NotFound(f"No expenses found for {month}/{year} for user with ID {user_id}")
    return expenses


def total_expenses(user_id, year, month):
    return total_amount(Expense, Expense.user_id == user_id, *in_month(Expense.date, year, month))


def get_expense(user_id, expense_id):
    expense = Expense.query.filter_by(id=expense_id, user_id=user_id).first()
    if expense is None:
        raise NotFound(f"Expense with ID {expense_id} not found")
    return expense


def update_expense(user_id, expense_id, changes):
    expense = get_expense(user_id, expense_id)
    for field, value in changes.items():
        setattr(expense, field, value)
    db.session.commit()
    return expense


def delete_expense(user_id, expense_id):
    expense = get_expense(user_id, expense_id)
    db.session.delete(expense)
    db.session.commit()
