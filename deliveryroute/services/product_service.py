"""Product and customer catalog logic."""
from deliveryroute import db
from deliveryroute.models import Customer, Product
from deliveryroute.services.audit_service import AuditService


class ProductService:
    @staticmethod
    def list_active():
        return Product.query.filter_by(is_active=True).order_by(Product.name).all()

    @staticmethod
    def create(code, name, price, wms_product_code=None, description=None, category=None, unit=None):
        if Product.query.filter_by(code=code).first():
            raise ValueError(f'Product code {code} already exists')
        product = Product(
            code=code,
            wms_product_code=wms_product_code,
            name=name,
            description=description,
            category=category,
            price=price,
            unit=unit or 'units',
        )
        db.session.add(product)
        db.session.flush()
        AuditService.log('product.create', 'Product', product.id, product.code)
        db.session.commit()
        return product


class CustomerService:
    @staticmethod
    def list_active():
        return Customer.query.filter_by(is_active=True).order_by(Customer.name).all()

    @staticmethod
    def validate_weekly_pattern(pattern):
        if pattern is None:
            return None
        if not isinstance(pattern, list) or len(pattern) != 7 or not all(isinstance(d, bool) for d in pattern):
            raise ValueError('Weekly pattern must be a list of 7 booleans, Monday first')
        return pattern

    @staticmethod
    def create(data, weekly_pattern=None):
        customer = Customer(**data)
        customer.weekly_pattern = CustomerService.validate_weekly_pattern(weekly_pattern)
        db.session.add(customer)
        db.session.flush()
        AuditService.log('customer.create', 'Customer', customer.id, customer.name)
        db.session.commit()
        return customer

    @staticmethod
    def update(customer_id, changes, weekly_pattern=None):
        customer = db.get_or_404(Customer, customer_id, description='Customer not found')
        if weekly_pattern is not None:
            customer.weekly_pattern = CustomerService.validate_weekly_pattern(weekly_pattern)
        for key, value in changes.items():
            setattr(customer, key, value)
        db.session.commit()
        return customer
