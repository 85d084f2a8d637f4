"""Product routes."""
from flask import jsonify
from flask_login import login_required

from deliveryroute import db
from deliveryroute.blueprints.products import products_bp
from deliveryroute.blueprints.params import form_error
from deliveryroute.decorators import admin_required
from deliveryroute.forms import ProductForm, bind_json
from deliveryroute.models import Product
from deliveryroute.services import ProductService


@products_bp.route('')
@login_required
def list():
    return jsonify([p.to_dict() for p in ProductService.list_active()])


@products_bp.route('/<int:product_id>')
@login_required
def detail(product_id):
    product = db.get_or_404(Product, product_id, description='Product not found')
    return jsonify(product.to_dict())


@products_bp.route('', methods=['POST'])
@login_required
@admin_required
def create():
    form = bind_json(ProductForm)
    if not form.validate():
        return form_error(form)
    try:
        product = ProductService.create(
            code=form.code.data,
            name=form.name.data,
            price=form.price.data,
            wms_product_code=form.wms_product_code.data or None,
            description=form.description.data or None,
            category=form.category.data or None,
            unit=form.unit.data or None,
        )
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(product.to_dict()), 201
