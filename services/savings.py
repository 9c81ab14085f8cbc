from flask import current_app
from werkzeug.exceptions import BadRequest, NotFound

from models import Savings, db
from services.expense import total_expenses
from services.income import total_income
from services.periods import in_month, total_amount


def total_savings(user_id, year, month, exclude_id=None):
    criteria = [Savings.user_id == user_id, *in_month(Savings.date, year, month)]
    if exclude_id is not None:
        criteria.append(Savings.id != exclude_id)
    return total_amount(Savings, *criteria)


def available_funds(user_id, year, month, exclude_id=None):
    """Income left over for the month after expenses and other savings."""
    return (total_income(user_id, year, month)
            - total_expenses(user_id, year, month)
            - total_savings(user_id, year, month, exclude_id=exclude_id))


def check_available_funds(user_id, amount, date, exclude_id=None):
    if not current_app.config.get('ENFORCE_AVAILABLE_FUNDS', True):
        return
    available = available_funds(user_id, date.year, date.month, exclude_id=exclude_id)
    if amount > available:
        raise BadRequest(
            f"Insufficient available funds: {available:.2f} left for {date.month}/{date.year}")


def create_savings(user_id, amount, date, description=None):
    check_available_funds(user_id, amount, date)
    savings = Savings(amount=amount, date=date, description=description, user_id=user_id)
    db.session.add(savings)
    db.session.commit()
    return savings


def list_savings(user_id):
    return (Savings.query.filter_by(user_id=user_id)
            .order_by(Savings.date.desc(), Savings.id.desc())
            .all())


def savings_for_month(user_id, year, month):
    return (Savings.query.filter(Savings.user_id == user_id, *in_month(Savings.date, year, month))
            .order_by(Savings.date.desc(), Savings.id.desc())
            .all())


def get_savings(user_id, savings_id):
    savings = Savings.query.filter_by(id=savings_id, user_id=user_id).first()
    if savings is None:
        raise NotFound(f"Savings entry with ID {savings_id} not found")
    return savings


def update_savings(user_id, savings_id, changes):
    savings = get_savings(user_id, savings_id)
    if 'amount' in changes or 'date' in changes:
        check_available_funds(user_id,
                              changes.get('amount', savings.amount),
                              changes.get('date', savings.date),
                              exclude_id=savings.id)
    for field, value in changes.items():
        setattr(savings, field, value)
    db.session.commit()
    return savings


def delete_savings(user_id, savings_id):
    savings = get_savings(user_id, savings_id)
    snapshot = savings.to_dict()
    db.session.delete(savings)
    db.session.commit()
    return snapshot
