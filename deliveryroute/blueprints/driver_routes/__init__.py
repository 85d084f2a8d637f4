"""Driver routes blueprint."""
from flask import Blueprint

driver_routes_bp = Blueprint('driver_routes', __name__)

from deliveryroute.blueprints.driver_routes import routes  # noqa: E402,F401
