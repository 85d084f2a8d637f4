"""Order items blueprint."""
from flask import Blueprint

order_items_bp = Blueprint('order_items', __name__)

from deliveryroute.blueprints.order_items import routes  # noqa: E402,F401
