"""Order routes."""
from flask import jsonify, request
from flask_login import login_required, current_user

from deliveryroute.blueprints.orders import orders_bp
from deliveryroute.blueprints.params import date_arg, form_error
from deliveryroute.decorators import admin_required
from deliveryroute.forms import OrderForm, OrderUpdateForm, bind_json, json_payload, provided_data
from deliveryroute.models import Order
from deliveryroute.services import OrderService


@orders_bp.route('')
@login_required
def list():
    driver_id = request.args.get('driverId', type=int)
    status = request.args.get('status', '')
    if status and status not in Order.STATUSES:
        return jsonify({'error': f'Unknown status: {status}'}), 400
    orders = OrderService.list_orders(driver_id=driver_id, status=status or None, day=date_arg())
    return jsonify([order.to_dict() for order in orders])


@orders_bp.route('/<int:order_id>')
@login_required
def detail(order_id):
    return jsonify(OrderService.get_order(order_id).to_dict())


@orders_bp.route('', methods=['POST'])
@login_required
@admin_required
def create():
    payload = json_payload()
    form = bind_json(OrderForm, payload)
    if not form.validate():
        return form_error(form)
    try:
        order = OrderService.create_order(
            customer_id=form.customer_id.data,
            scheduled_date=form.scheduled_date.data,
            items_data=payload.get('items', []),
            driver_id=form.driver_id.data,
            order_number=form.order_number.data or None,
            wms_order_code=form.wms_order_code.data or None,
            notes=form.notes.data or None,
            created_by_id=current_user.id,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(order.to_dict()), 201


@orders_bp.route('/<int:order_id>', methods=['PATCH'])
@login_required
def update(order_id):
    form = bind_json(OrderUpdateForm)
    if not form.validate():
        return form_error(form)
    try:
        order = OrderService.update_order(order_id, provided_data(form))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(order.to_dict())
