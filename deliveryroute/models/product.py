"""Product model."""
from datetime import datetime

from deliveryroute import db
from deliveryroute.utils import iso, money


class Product(db.Model):
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), unique=True, nullable=False, index=True)
    wms_product_code = db.Column(db.String(50), nullable=True, index=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(100), nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    unit = db.Column(db.String(20), default='units')
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    order_items = db.relationship('OrderItem', back_populates='product', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'code': self.code,
            'wmsProductCode': self.wms_product_code,
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'price': money(self.price),
            'unit': self.unit,
            'isActive': self.is_active,
            'createdAt': iso(self.created_at),
        }

    def __repr__(self):
        return f'<Product {self.code}>'
