from flask import Blueprint, current_app, jsonify
from auth_utils import login_required, current_user_id
from forms import BudgetForm, validate_payload
from services import budget as budget_service
from services.periods import check_period

budget_bp = Blueprint('budget', __name__, url_prefix='/budget')


@budget_bp.route('', methods=['POST'])
@login_required
def create():
    form = validate_payload(BudgetForm)
    budget = budget_service.create_budget(current_user_id(), form.amount.data, form.month.data, form.year.data)
    current_app.logger.info("Budget %s created for %s/%s", budget.id, budget.month, budget.year)
    return jsonify(budget.to_dict()), 201


@budget_bp.route('', methods=['GET'])
@login_required
def index():
    budgets = budget_service.list_budgets(current_user_id())
    return jsonify([b.to_dict() for b in budgets])


@budget_bp.route('/<int:year>/<int:month>', methods=['GET'])
@login_required
def by_month(year, month):
    check_period(year, month)
    budget = budget_service.get_budget(current_user_id(), year, month)
    return jsonify(budget.to_dict())


@budget_bp.route('/<int:year>/<int:month>/remaining', methods=['GET'])
@login_required
def remaining(year, month):
    check_period(year, month)
    return jsonify(budget_service.budget_remaining(current_user_id(), year, month))
