from flask import Blueprint, current_app, jsonify
from werkzeug.exceptions import Unauthorized
from auth_utils import create_access_token, login_required, current_user_id
from forms import LoginForm, ProfileForm, RegisterForm, validate_payload
from models import User, db
from services import users

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')


@auth_bp.route('/register', methods=['POST'])
def register():
    form = validate_payload(RegisterForm)
    user = users.register_user(form.name.data, form.email.data, form.password.data)
    current_app.logger.info("Registered user %s", user.id)
    return jsonify(message="User registered successfully", user=user.to_dict()), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    form = validate_payload(LoginForm)
    try:
        user = users.authenticate(form.email.data, form.password.data)
    except Unauthorized:
        current_app.logger.warning("Failed login attempt")
        raise

    current_app.logger.info("User %s logged in", user.id)
    return jsonify(
        message="Login successful",
        accessToken=create_access_token(user),
        user={"id": user.id, "email": user.email, "name": user.name},
    )


@auth_bp.route('/profile', methods=['GET'])
@login_required
def profile():
    user = db.session.get(User, current_user_id())
    return jsonify(user.to_dict())


@auth_bp.route('/profile', methods=['PATCH'])
@login_required
def update_profile():
    form = validate_payload(ProfileForm)
    user = users.update_profile(current_user_id(), form.name.data)
    return jsonify(user.to_dict())
