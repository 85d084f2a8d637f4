"""Products blueprint."""
from flask import Blueprint

products_bp = Blueprint('products', __name__)

from deliveryroute.blueprints.products import routes  # noqa: E402,F401
