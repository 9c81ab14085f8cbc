from datetime import datetime
from decimal import Decimal

from sqlalchemy import func
from werkzeug.exceptions import BadRequest

from forms import MAX_YEAR, MIN_YEAR
from models import db

ZERO = Decimal('0.00')


def check_period(year, month):
    if not 1 <= month <= 12:
        raise BadRequest("month must be between 1 and 12")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise BadRequest("year must be between %d and %d" % (MIN_YEAR, MAX_YEAR))


def month_bounds(year, month):
    """Half-open datetime range [first of month, first of next month)."""
    start = datetime(year, month, 1)
    if month == 12:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, month + 1, 1)
    return start, end


def in_month(column, year, month):
    start, end = month_bounds(year, month)
    return [column >= start, column < end]


def total_amount(model, *criteria):
    total = db.session.query(func.coalesce(func.sum(model.amount), 0)).filter(*criteria).scalar()
    return Decimal(str(total)).quantize(ZERO) if total is not None else ZERO
