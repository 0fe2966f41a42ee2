"""
Authentication Routes
Register, login, logout and the current-user lookup
"""
from flask import current_app, jsonify, request
from flask_login import current_user, login_required, login_user, logout_user

from . import auth_bp
from .forms import LoginForm, RegisterForm
from extensions import limiter
from services import get_services


def _auth_rate_limit():
    return current_app.config['AUTH_RATE_LIMIT']


@auth_bp.route('/register', methods=['POST'])
@limiter.limit(_auth_rate_limit)
def register():
    """Create an account and log it in."""
    form = RegisterForm.from_json(request.get_json(silent=True)).validate_or_raise()

    user = get_services().auth.register(
        username=form.username.data,
        password=form.password.data,
        display_name=form.display_name.data,
        email=form.email.data,
    )
    login_user(user)
    return jsonify(user.to_dict()), 201


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(_auth_rate_limit)
def login():
    form = LoginForm.from_json(request.get_json(silent=True)).validate_or_raise()

    user = get_services().auth.authenticate(form.username.data, form.password.data)
    login_user(user)
    current_app.logger.info('User %s logged in', user.id)
    return jsonify(user.to_dict())


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    current_app.logger.info('User %s logged out', current_user.id)
    logout_user()
    return jsonify({'success': True})


@auth_bp.route('/user', methods=['GET'])
@login_required
def current_user_info():
    return jsonify(current_user.to_dict())
