from flask import Blueprint, current_app, jsonify
from auth_utils import login_required, current_user_id
from forms import SavingsForm, SavingsUpdateForm, validate_payload
from services import savings as savings_service
from services.periods import check_period

savings_bp = Blueprint('savings', __name__, url_prefix='/savings')


@savings_bp.route('', methods=['POST'])
@login_required
def add_savings():
    form = validate_payload(SavingsForm)
    savings = savings_service.create_savings(
        current_user_id(), form.amount.data, form.date.data, description=form.description.data or None)
    current_app.logger.info("Savings entry %s created", savings.id)
    return jsonify(savings.to_dict()), 201


@savings_bp.route('', methods=['GET'])
@login_required
def index():
    entries = savings_service.list_savings(current_user_id())
    return jsonify([s.to_dict() for s in entries])


@savings_bp.route('/<int:year>/<int:month>', methods=['GET'])
@login_required
def by_month(year, month):
    check_period(year, month)
    entries = savings_service.savings_for_month(current_user_id(), year, month)
    return jsonify([s.to_dict() for s in entries])


@savings_bp.route('/total/<int:year>/<int:month>', methods=['GET'])
@login_required
def total(year, month):
    check_period(year, month)
    return jsonify(total=float(savings_service.total_savings(current_user_id(), year, month)))


@savings_bp.route('/<int:id>', methods=['PUT'])
@login_required
def edit_savings(id):
    form = validate_payload(SavingsUpdateForm)
    savings = savings_service.update_savings(current_user_id(), id, form.provided_data())
    current_app.logger.info("Savings entry %s updated", id)
    return jsonify(savings.to_dict())


@savings_bp.route('/<int:id>', methods=['DELETE'])
@login_required
def delete_savings(id):
    deleted = savings_service.delete_savings(current_user_id(), id)
    current_app.logger.info("Savings entry %s deleted", id)
    return jsonify(deleted)
