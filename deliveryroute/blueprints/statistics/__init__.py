"""Statistics blueprint."""
from flask import Blueprint

statistics_bp = Blueprint('statistics', __name__)

from deliveryroute.blueprints.statistics import routes  # noqa: E402,F401
