"""Orders blueprint."""
from flask import Blueprint

orders_bp = Blueprint('orders', __name__)

from deliveryroute.blueprints.orders import routes  # noqa: E402,F401
