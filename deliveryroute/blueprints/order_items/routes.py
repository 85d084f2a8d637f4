"""Order item routes."""
from flask import jsonify
from flask_login import login_required

from deliveryroute.blueprints.order_items import order_items_bp
from deliveryroute.blueprints.params import form_error
from deliveryroute.decorators import admin_required
from deliveryroute.forms import OrderItemForm, OrderItemUpdateForm, bind_json, provided_data
from deliveryroute.services import OrderService


@order_items_bp.route('', methods=['POST'])
@login_required
@admin_required
def create():
    form = bind_json(OrderItemForm)
    if not form.validate():
        return form_error(form)
    try:
        item = OrderService.add_item(
            form.order_id.data, form.product_id.data, form.quantity.data, price=form.price.data,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(item.to_dict()), 201


@order_items_bp.route('/<int:item_id>', methods=['PATCH'])
@login_required
def update(item_id):
    form = bind_json(OrderItemUpdateForm)
    if not form.validate():
        return form_error(form)
    try:
        item = OrderService.update_item(item_id, provided_data(form))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(item.to_dict())
