"""Route session routes: start, end (Z-closeout) and lookups."""
from flask import abort, jsonify, request
from flask_login import login_required, current_user

from deliveryroute.blueprints.route_sessions import route_sessions_bp
from deliveryroute.blueprints.params import form_error, required_int_arg
from deliveryroute.forms import RouteSessionStartForm, RouteSessionEndForm, bind_json, json_payload
from deliveryroute.services import RouteSessionService

# Returned stock may arrive under any of these keys
RETURNED_INVENTORY_KEYS = ('inventoryReturned', 'returnItems', 'returnedInventoryList')


@route_sessions_bp.route('')
@login_required
def list():
    driver_id = required_int_arg('driverId', 'Driver ID')
    return jsonify([s.to_dict() for s in RouteSessionService.list_for_driver(driver_id)])


@route_sessions_bp.route('/active')
@login_required
def active():
    driver_id = request.args.get('driverId', type=int) or current_user.id
    session = RouteSessionService.active_for_driver(driver_id)
    if session is None:
        abort(404, description='No active route session')
    return jsonify(session.to_dict())


@route_sessions_bp.route('/start', methods=['POST'])
@login_required
def start():
    form = bind_json(RouteSessionStartForm)
    if not form.validate():
        return form_error(form)
    try:
        session = RouteSessionService.start_session(
            route_id=form.route_id.data,
            driver_id=form.driver_id.data or current_user.id,
            start_mileage=form.start_mileage.data,
            assistant_name=form.assistant_name.data or None,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(session.to_dict()), 201


@route_sessions_bp.route('/end', methods=['POST'])
@login_required
def end():
    payload = json_payload()
    form = bind_json(RouteSessionEndForm, payload)
    if not form.validate():
        return form_error(form)
    returned = next(
        (payload[key] for key in RETURNED_INVENTORY_KEYS if payload.get(key) is not None), None,
    )
    try:
        session, report = RouteSessionService.end_session(
            form.session_id.data,
            form.end_mileage.data,
            inventory_returned=returned,
            observations=form.observations.data or None,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'session': session.to_dict(), 'report': report.to_dict()})
