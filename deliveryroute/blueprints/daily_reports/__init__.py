"""Daily reports blueprint."""
from flask import Blueprint

daily_reports_bp = Blueprint('daily_reports', __name__)

from deliveryroute.blueprints.daily_reports import routes  # noqa: E402,F401
