from werkzeug.exceptions import Conflict, Unauthorized
from werkzeug.security import check_password_hash, generate_password_hash

from models import User, db


def normalize_email(email):
    return email.strip().lower()


def register_user(name, email, password):
    email = normalize_email(email)
    if User.query.filter_by(email=email).first():
        raise Conflict("User with this email already exists")

    user = User(name=name.strip(), email=email, password_hash=generate_password_hash(password))
    db.session.add(user)
    db.session.commit()
    return user


def authenticate(email, password):
    user = User.query.filter_by(email=normalize_email(email)).first()
    if not user or not check_password_hash(user.password_hash, password):
        raise Unauthorized("Invalid credentials")
    return user


def update_profile(user_id, name):
    user = db.session.get(User, user_id)
    user.name = name.strip()
    db.session.commit()
    return user
