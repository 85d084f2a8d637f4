"""Statistics routes."""
from flask import jsonify
from flask_login import login_required

from deliveryroute.blueprints.statistics import statistics_bp
from deliveryroute.blueprints.params import date_arg, required_int_arg
from deliveryroute.services import StatisticsService


@statistics_bp.route('')
@login_required
def order_statistics():
    driver_id = required_int_arg('driverId', 'Driver ID')
    return jsonify(StatisticsService.get_order_statistics(driver_id, date_arg()))
