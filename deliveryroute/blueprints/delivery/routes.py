"""Delivery action routes: start, complete, not delivered, GPS capture."""
from flask import jsonify
from flask_login import login_required, current_user

from deliveryroute.blueprints.delivery import delivery_bp
from deliveryroute.blueprints.params import form_error
from deliveryroute.forms import (
    DeliveryStartForm, DeliveryCompleteForm, NotDeliveredForm, CaptureGpsForm,
    bind_json, json_payload,
)
from deliveryroute.services import DeliveryService


@delivery_bp.route('/start', methods=['POST'])
@login_required
def start():
    form = bind_json(DeliveryStartForm)
    if not form.validate():
        return form_error(form)
    try:
        order = DeliveryService.start(form.order_id.data, user_id=current_user.id)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(order.to_dict())


@delivery_bp.route('/complete', methods=['POST'])
@login_required
def complete():
    payload = json_payload()
    form = bind_json(DeliveryCompleteForm, payload)
    if not form.validate():
        return form_error(form)
    try:
        order = DeliveryService.complete(
            form.order_id.data,
            items_data=payload.get('items'),
            delivered_amount=form.delivered_amount.data,
            signature_data=form.signature_data.data or None,
            photo_url=form.photo_url.data or None,
            user_id=current_user.id,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(order.to_dict())


@delivery_bp.route('/not-delivered', methods=['POST'])
@login_required
def not_delivered():
    form = bind_json(NotDeliveredForm)
    if not form.validate():
        return form_error(form)
    try:
        order = DeliveryService.mark_not_delivered(
            form.order_id.data,
            form.reason.data,
            gps_latitude=form.gps_latitude.data,
            gps_longitude=form.gps_longitude.data,
            user_id=current_user.id,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(order.to_dict())


@delivery_bp.route('/capture-gps', methods=['POST'])
@login_required
def capture_gps():
    form = bind_json(CaptureGpsForm)
    if not form.validate():
        return form_error(form)
    order = DeliveryService.capture_gps(form.order_id.data, form.latitude.data, form.longitude.data)
    return jsonify(order.to_dict())
