from flask import Blueprint, jsonify
from auth_utils import login_required, current_user_id
from services.periods import check_period
from services.summary import monthly_summary

summary_bp = Blueprint('summary', __name__, url_prefix='/summary')


@summary_bp.route('/<int:year>/<int:month>', methods=['GET'])
@login_required
def index(year, month):
    check_period(year, month)
    return jsonify(monthly_summary(current_user_id(), year, month))
