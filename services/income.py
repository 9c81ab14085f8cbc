from werkzeug.exceptions import NotFound

from models import Income, db
from services.periods import total_amount


def create_income(user_id, amount, source, month, year):
    income = Income(amount=amount, source=source, month=month, year=year, user_id=user_id)
    db.session.add(income)
    db.session.commit()
    return income


def list_incomes(user_id):
    incomes = (Income.query.filter_by(user_id=user_id)
               .order_by(Income.year.desc(), Income.month.desc())
               .all())
    if not incomes:
        raise NotFound(f"No income records found for user with ID {user_id}")
    return incomes


def incomes_for_month(user_id, year, month):
    return (Income.query.filter_by(user_id=user_id, month=month, year=year)
            .order_by(Income.created_at.desc(), Income.id.desc())
            .all())


def total_income(user_id, year, month):
    return total_amount(Income, Income.user_id == user_id, Income.month == month, Income.year == year)


def get_income(user_id, income_id):
    income = Income.query.filter_by(id=income_id, user_id=user_id).first()
    if income is None:
        raise NotFound(f"Income with ID {income_id} not found")
    return income


def update_income(user_id, income_id, changes):
    income = get_income(user_id, income_id)
    for field, value in changes.items():
        setattr(income, field, value)
    db.session.commit()
    return income


def delete_income(user_id, income_id):
    income = get_income(user_id, income_id)
    snapshot = income.to_dict()
    db.session.delete(income)
    db.session.commit()
    return snapshot
