"""
Request payload validation.

JSON bodies are fed into Flask-WTF forms so that every resource validates
its input the same way. CSRF is off: the API authenticates with bearer
tokens, not cookies.
"""

import decimal
from datetime import datetime, timezone

from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from werkzeug.exceptions import BadRequest
from wtforms import DecimalField, Field, IntegerField, PasswordField, StringField
from wtforms.validators import DataRequired, Email, Length, NumberRange, Optional
from wtforms.widgets import TextInput

MIN_YEAR = 1900
# month_bounds needs the first day of the following month to exist
MAX_YEAR = 9998
CENTS = decimal.Decimal('0.01')
# largest value a NUMERIC(12, 2) column holds
MAX_AMOUNT = decimal.Decimal('9999999999.99')


class ValidationError(BadRequest):
    """Payload failed validation; ``errors`` maps field names to messages."""

    def __init__(self, errors, description="Validation failed"):
        super().__init__(description=description)
        self.errors = errors


def parse_iso_datetime(value):
    """Parse an ISO 8601 date or datetime into a naive UTC datetime."""
    if not isinstance(value, str):
        raise ValueError("expected a string")
    parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            raise ValueError("date out of range")
    if parsed.year > MAX_YEAR:
        raise ValueError("year must not be greater than %d" % MAX_YEAR)
    return parsed


class AmountField(DecimalField):
    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        try:
            if isinstance(value, bool):
                raise ValueError(value)
            self.data = decimal.Decimal(str(value)).quantize(CENTS)
            if not self.data.is_finite():
                raise ValueError(value)
        except (decimal.InvalidOperation, ValueError):
            self.data = None
            raise ValueError(self.gettext("Not a valid decimal value."))


class StrictIntegerField(IntegerField):
    """IntegerField that refuses JSON booleans and fractional numbers instead of truncating."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            self.data = None
            raise ValueError(self.gettext("Not a valid integer value."))
        super().process_formdata(valuelist)


class IsoDateTimeField(Field):
    widget = TextInput()

    def _value(self):
        return self.data.isoformat() if self.data else ''

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        try:
            self.data = parse_iso_datetime(valuelist[0])
        except ValueError:
            self.data = None
            raise ValueError(self.gettext("Not a valid ISO 8601 date."))


class ApiForm(FlaskForm):
    class Meta:
        csrf = False

    # optional text fields that a blank string clears
    clearable = ()

    def provided_data(self):
        """Only the fields present in the payload, for partial updates."""
        data = {}
        for field in self:
            if not field.raw_data:
                continue
            if field.name in self.clearable:
                data[field.name] = field.data or None
            elif field.data is not None:
                data[field.name] = field.data
        return data


def validate_payload(form_class):
    """Validate the JSON body against ``form_class`` or raise ValidationError."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError({}, "Request body must be a JSON object")

    form = form_class(formdata=MultiDict({k: v for k, v in payload.items() if v is not None}))
    if not form.validate():
        raise ValidationError(form.errors)
    return form


def strip_filter(value):
    return value.strip() if isinstance(value, str) else value


amount_required = NumberRange(
    min=0, max=MAX_AMOUNT, message="amount must be a number between 0 and %s" % MAX_AMOUNT)
expense_amount = NumberRange(
    min=CENTS, max=MAX_AMOUNT, message="amount must be between 0.01 and %s" % MAX_AMOUNT)
month_range = NumberRange(min=1, max=12, message="month must be between 1 and 12")
year_range = NumberRange(
    min=MIN_YEAR, max=MAX_YEAR, message="year must be between %d and %d" % (MIN_YEAR, MAX_YEAR))


class RegisterForm(ApiForm):
    name = StringField('name', filters=[strip_filter], validators=[DataRequired(), Length(max=100)])
    email = StringField('email', filters=[strip_filter], validators=[DataRequired(), Email(), Length(max=255)])
    password = PasswordField('password', validators=[DataRequired(), Length(min=6)])


class LoginForm(ApiForm):
    email = StringField('email', filters=[strip_filter], validators=[DataRequired()])
    password = PasswordField('password', validators=[DataRequired()])


class ProfileForm(ApiForm):
    name = StringField('name', filters=[strip_filter], validators=[DataRequired(), Length(max=100)])


class BudgetForm(ApiForm):
    amount = AmountField('amount', validators=[amount_required])
    month = StrictIntegerField('month', validators=[month_range])
    year = StrictIntegerField('year', validators=[year_range])


class IncomeForm(ApiForm):
    amount = AmountField('amount', validators=[amount_required])
    source = StringField('source', filters=[strip_filter], validators=[DataRequired(), Length(max=100)])
    month = StrictIntegerField('month', validators=[month_range])
    year = StrictIntegerField('year', validators=[year_range])


class IncomeUpdateForm(ApiForm):
    amount = AmountField('amount', validators=[Optional(), amount_required])
    source = StringField('source', filters=[strip_filter], validators=[Optional(), Length(max=100)])
    month = StrictIntegerField('month', validators=[Optional(), month_range])
    year = StrictIntegerField('year', validators=[Optional(), year_range])


class ExpenseForm(ApiForm):
    amount = AmountField('amount', validators=[expense_amount])
    category = StringField('category', filters=[strip_filter], validators=[Optional(), Length(max=50)])
    description = StringField('description', validators=[Optional()])
    date = IsoDateTimeField('date', validators=[DataRequired()])


class ExpenseUpdateForm(ApiForm):
    clearable = ('category', 'description')

    amount = AmountField('amount', validators=[Optional(), expense_amount])
    category = StringField('category', filters=[strip_filter], validators=[Optional(), Length(max=50)])
    description = StringField('description', validators=[Optional()])
    date = IsoDateTimeField('date', validators=[Optional()])


class SavingsForm(ApiForm):
    amount = AmountField('amount', validators=[amount_required])
    date = IsoDateTimeField('date', validators=[DataRequired()])
    description = StringField('description', validators=[Optional()])


class SavingsUpdateForm(ApiForm):
    clearable = ('description',)

    amount = AmountField('amount', validators=[Optional(), amount_required])
    date = IsoDateTimeField('date', validators=[Optional()])
    description = StringField('description', validators=[Optional()])
