from flask import Blueprint, current_app, jsonify
from auth_utils import login_required, current_user_id
from forms import IncomeForm, IncomeUpdateForm, validate_payload
from services import income as income_service
from services.periods import check_period

income_bp = Blueprint('income', __name__, url_prefix='/incomes')


@income_bp.route('', methods=['POST'])
@login_required
def add_income():
    form = validate_payload(IncomeForm)
    income = income_service.create_income(
        current_user_id(), form.amount.data, form.source.data, form.month.data, form.year.data)
    current_app.logger.info("Income %s created for %s/%s", income.id, income.month, income.year)
    return jsonify(income.to_dict()), 201


@income_bp.route('', methods=['GET'])
@login_required
def index():
    incomes = income_service.list_incomes(current_user_id())
    return jsonify([i.to_dict() for i in incomes])


@income_bp.route('/<int:year>/<int:month>', methods=['GET'])
@login_required
def by_month(year, month):
    check_period(year, month)
    incomes = income_service.incomes_for_month(current_user_id(), year, month)
    return jsonify([i.to_dict() for i in incomes])


@income_bp.route('/total/<int:year>/<int:month>', methods=['GET'])
@login_required
def total(year, month):
    check_period(year, month)
    return jsonify(total=float(income_service.total_income(current_user_id(), year, month)))


@income_bp.route('/<int:id>', methods=['PUT'])
@login_required
def edit_income(id):
    form = validate_payload(IncomeUpdateForm)
    income = income_service.update_income(current_user_id(), id, form.provided_data())
    current_app.logger.info("Income %s updated", id)
    return jsonify(income.to_dict())


@income_bp.route('/<int:id>', methods=['DELETE'])
@login_required
def delete_income(id):
    deleted = income_service.delete_income(current_user_id(), id)
    current_app.logger.info("Income %s deleted", id)
    return jsonify(deleted)
