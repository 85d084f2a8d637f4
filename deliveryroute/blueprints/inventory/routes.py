"""Inventory routes."""
from flask import jsonify
from flask_login import login_required, current_user

from deliveryroute.blueprints.inventory import inventory_bp
from deliveryroute.blueprints.params import bool_arg, form_error, required_int_arg
from deliveryroute.forms import InventoryForm, bind_json
from deliveryroute.services import InventoryService


@inventory_bp.route('')
@login_required
def list():
    driver_id = required_int_arg('driverId', 'Driver ID')
    rows = InventoryService.get_inventory(driver_id, low_stock_only=bool_arg('lowStock'))
    return jsonify([row.to_dict() for row in rows])


@inventory_bp.route('/summary')
@login_required
def summary():
    driver_id = required_int_arg('driverId', 'Driver ID')
    return jsonify(InventoryService.summary(driver_id))


@inventory_bp.route('', methods=['PATCH'])
@login_required
def update():
    form = bind_json(InventoryForm)
    if not form.validate():
        return form_error(form)
    driver_id = form.driver_id.data or current_user.id
    try:
        row = InventoryService.set_quantity(form.product_id.data, driver_id, form.quantity.data)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(row.to_dict())
