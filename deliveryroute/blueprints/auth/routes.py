"""Auth routes."""
import logging

from flask import jsonify, session
from flask_login import login_user, logout_user, login_required, current_user

from deliveryroute.blueprints.auth import auth_bp
from deliveryroute.forms import LoginForm, bind_json
from deliveryroute.models import User

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    form = bind_json(LoginForm)
    if not form.validate():
        return jsonify({'error': 'Username and password are required'}), 400
    user = User.query.filter_by(username=form.username.data).first()
    if user is None or not user.check_password(form.password.data):
        logger.info('Failed login for %s', form.username.data)
        return jsonify({'error': 'Invalid credentials'}), 401
    if not user.is_active:
        return jsonify({'error': 'Account is disabled'}), 401
    login_user(user)
    return jsonify({'user': user.to_dict()})


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    session.clear()
    return jsonify({'message': 'Logged out successfully'})


@auth_bp.route('/me')
@login_required
def me():
    return jsonify({'user': current_user.to_dict()})
