"""Session authentication: register, login, logout, current user."""

import logging

from flask import jsonify
from flask_login import current_user, login_required, login_user, logout_user
from werkzeug.security import check_password_hash, generate_password_hash

from extensions import get_store, login_manager
from schemas import UserCredentials, UserRead, dump, parse_body
from storage import User

from . import bp

logger = logging.getLogger(__name__)


@login_manager.user_loader
def load_user(user_id: str | None) -> User | None:
    """Resolve a ``User`` record for Flask-Login sessions."""

    if not user_id:
        return None
    try:
        return get_store().get_user(int(user_id))
    except ValueError:
        return None


@bp.route('/register', methods=['POST'])
def register():
    creds = parse_body(UserCredentials)
    user = get_store().create_user(creds.username, generate_password_hash(creds.password))
    login_user(user)
    return jsonify(dump(UserRead, user)), 201


@bp.route('/login', methods=['POST'])
def login():
    creds = parse_body(UserCredentials)
    user = get_store().get_user_by_username(creds.username)
    if user is None or not check_password_hash(user.password, creds.password):
        logger.warning("Failed login for %s", creds.username)
        return jsonify(message="Invalid username or password"), 401
    login_user(user)
    return jsonify(dump(UserRead, user))


@bp.route('/logout', methods=['POST'])
def logout():
    logout_user()
    return "", 200


@bp.route('/user')
@login_required
def me():
    return jsonify(dump(UserRead, current_user._get_current_object()))
