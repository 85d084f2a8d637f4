"""Route sessions blueprint."""
from flask import Blueprint

route_sessions_bp = Blueprint('route_sessions', __name__)

from deliveryroute.blueprints.route_sessions import routes  # noqa: E402,F401
