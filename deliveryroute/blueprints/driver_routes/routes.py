"""Route (planned itinerary) endpoints."""
from flask import jsonify
from flask_login import login_required

from deliveryroute import db
from deliveryroute.blueprints.driver_routes import driver_routes_bp
from deliveryroute.blueprints.params import form_error, required_int_arg
from deliveryroute.decorators import admin_required
from deliveryroute.forms import RouteForm, RouteUpdateForm, bind_json, json_payload, provided_data
from deliveryroute.models import Route
from deliveryroute.services import RouteService


@driver_routes_bp.route('')
@login_required
def list():
    driver_id = required_int_arg('driverId', 'Driver ID')
    return jsonify([r.to_dict() for r in RouteService.list_for_driver(driver_id)])


@driver_routes_bp.route('/<int:route_id>')
@login_required
def detail(route_id):
    route = db.get_or_404(Route, route_id, description='Route not found')
    return jsonify(route.to_dict())


@driver_routes_bp.route('', methods=['POST'])
@login_required
@admin_required
def create():
    payload = json_payload()
    form = bind_json(RouteForm, payload)
    if not form.validate():
        return form_error(form)
    try:
        route = RouteService.create(
            driver_id=form.driver_id.data,
            name=form.name.data,
            date=form.date.data,
            waypoints=payload.get('waypoints'),
            status=form.status.data or None,
            total_distance=form.total_distance.data,
            estimated_time=form.estimated_time.data,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(route.to_dict()), 201


@driver_routes_bp.route('/<int:route_id>', methods=['PATCH'])
@login_required
def update(route_id):
    form = bind_json(RouteUpdateForm)
    if not form.validate():
        return form_error(form)
    route = RouteService.update(route_id, provided_data(form))
    return jsonify(route.to_dict())
