from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import current_app, g, request
from werkzeug.exceptions import Unauthorized

from models import User, db


def create_access_token(user, expires_in=None):
    if expires_in is None:
        expires_in = current_app.config['JWT_EXPIRES_IN']
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "name": user.name,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, current_app.config['JWT_SECRET'], algorithm=current_app.config['JWT_ALGORITHM'])


def decode_access_token(token):
    return jwt.decode(
        token,
        current_app.config['JWT_SECRET'],
        algorithms=[current_app.config['JWT_ALGORITHM']],
        options={"require": ["exp", "sub"]},
    )


def bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def load_current_user():
    """Resolve the bearer token to an existing user or raise Unauthorized."""
    token = bearer_token()
    if token is None:
        raise Unauthorized("Missing bearer token")

    try:
        payload = decode_access_token(token)
        user_id = int(payload['sub'])
    except jwt.ExpiredSignatureError:
        current_app.logger.warning("Rejected expired token")
        raise Unauthorized("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        current_app.logger.warning("Rejected invalid token")
        raise Unauthorized("Invalid token")

    user = db.session.get(User, user_id)
    if user is None:
        current_app.logger.warning("Rejected token for missing user %s", user_id)
        raise Unauthorized("User not found")
    return user


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = load_current_user()
        g.current_user = {"id": user.id, "email": user.email, "name": user.name}
        return fn(*args, **kwargs)
    return wrapper


def current_user_id():
    return g.current_user['id']
