"""Customer routes."""
from flask import jsonify
from flask_login import login_required

from deliveryroute import db
from deliveryroute.blueprints.customers import customers_bp
from deliveryroute.blueprints.params import form_error
from deliveryroute.decorators import admin_required
from deliveryroute.forms import CustomerForm, CustomerUpdateForm, bind_json, json_payload, provided_data
from deliveryroute.models import Customer
from deliveryroute.services import CustomerService


@customers_bp.route('')
@login_required
def list():
    return jsonify([c.to_dict() for c in CustomerService.list_active()])


@customers_bp.route('/<int:customer_id>')
@login_required
def detail(customer_id):
    customer = db.get_or_404(Customer, customer_id, description='Customer not found')
    return jsonify(customer.to_dict())


@customers_bp.route('', methods=['POST'])
@login_required
@admin_required
def create():
    payload = json_payload()
    form = bind_json(CustomerForm, payload)
    if not form.validate():
        return form_error(form)
    try:
        customer = CustomerService.create(provided_data(form), weekly_pattern=payload.get('weeklyPattern'))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(customer.to_dict()), 201


@customers_bp.route('/<int:customer_id>', methods=['PATCH'])
@login_required
@admin_required
def update(customer_id):
    payload = json_payload()
    form = bind_json(CustomerUpdateForm, payload)
    if not form.validate():
        return form_error(form)
    try:
        customer = CustomerService.update(
            customer_id, provided_data(form), weekly_pattern=payload.get('weeklyPattern'),
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(customer.to_dict())
