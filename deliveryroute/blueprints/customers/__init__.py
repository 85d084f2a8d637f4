"""Customers blueprint."""
from flask import Blueprint

customers_bp = Blueprint('customers', __name__)

from deliveryroute.blueprints.customers import routes  # noqa: E402,F401
