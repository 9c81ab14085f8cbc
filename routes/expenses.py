from flask import Blueprint, current_app, jsonify
from auth_utils import login_required, current_user_id
from forms import ExpenseForm, ExpenseUpdateForm, validate_payload
from services import expense as expense_service
from services.periods import check_period

expenses_bp = Blueprint('expenses', __name__, url_prefix='/expenses')


@expenses_bp.route('', methods=['POST'])
@login_required
def add_expense():
    form = validate_payload(ExpenseForm)
    expense = expense_service.create_expense(
        current_user_id(),
        form.amount.data,
        form.date.data,
        category=form.category.data or None,
        description=form.description.data or None,
    )
    current_app.logger.info("Expense %s created", expense.id)
    return jsonify(expense.to_dict()), 201


@expenses_bp.route('', methods=['GET'])
@login_required
def index():
    expenses = expense_service.list_expenses(current_user_id())
    return jsonify([e.to_dict() for e in expenses])


@expenses_bp.route('/category/<string:name>', methods=['GET'])
@login_required
def by_category(name):
    expenses = expense_service.expenses_by_category(current_user_id(), name)
    return jsonify([e.to_dict() for e in expenses])


@expenses_bp.route('/<int:year>/<int:month>', methods=['GET'])
@login_required
def by_month(year, month):
    check_period(year, month)
    expenses = expense_service.expenses_for_month(current_user_id(), year, month)
    return jsonify([e.to_dict() for e in expenses])


@expenses_bp.route('/total/<int:year>/<int:month>', methods=['GET'])
@login_required
def total(year, month):
    check_period(year, month)
    return jsonify(total=float(expense_service.total_expenses(current_user_id(), year, month)))


@expenses_bp.route('/<int:id>', methods=['PATCH'])
@login_required
def edit_expense(id):
    form = validate_payload(ExpenseUpdateForm)
    expense = expense_service.update_expense(current_user_id(), id, form.provided_data())
    current_app.logger.info("Expense %s updated", id)
    return jsonify(expense.to_dict())


@expenses_bp.route('/<int:id>', methods=['DELETE'])
@login_required
def delete_expense(id):
    expense_service.delete_expense(current_user_id(), id)
    current_app.logger.info("Expense %s deleted", id)
    return '', 204
