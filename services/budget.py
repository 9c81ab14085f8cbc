from werkzeug.exceptions import Conflict, NotFound

from models import Budget, Expense, db
from services.periods import in_month, total_amount


def create_budget(user_id, amount, month, year):
    if find_budget(user_id, year, month) is not None:
        raise Conflict(f"Budget for {month}/{year} already exists for this user.")

    budget = Budget(amount=amount, month=month, year=year, user_id=user_id)
    db.session.add(budget)
    db.session.commit()
    return budget


def list_budgets(user_id):
    budgets = (Budget.query.filter_by(user_id=user_id)
               .order_by(Budget.year.desc(), Budget.month.desc())
               .all())
    if not budgets:
        raise NotFound(f"No budgets found for user with ID {user_id}")
    return budgets


def find_budget(user_id, year, month):
    return Budget.query.filter_by(user_id=user_id, month=month, year=year).first()


def get_budget(user_id, year, month):
    budget = find_budget(user_id, year, month)
    if budget is None:
        raise NotFound(f"Budget for {month}/{year} not found for user with ID {user_id}")
    return budget


def budget_remaining(user_id, year, month):
    budget = get_budget(user_id, year, month)
    spent = total_amount(Expense, Expense.user_id == user_id, *in_month(Expense.date, year, month))
    remaining = budget.amount - spent
    return {
        "budget": float(budget.amount),
        "totalExpenses": float(spent),
        "remaining": float(remaining),
        "isOverBudget": remaining < 0,
    }
