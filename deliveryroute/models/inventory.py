"""Per-driver vehicle inventory."""
from datetime import datetime

from deliveryroute import db
from deliveryroute.utils import iso


class Inventory(db.Model):
    __tablename__ = 'inventory'
    __table_args__ = (
        db.UniqueConstraint('product_id', 'driver_id', name='uq_inventory_product_driver'),
    )

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False)
    driver_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    quantity = db.Column(db.Integer, default=0, nullable=False)
    reserved_quantity = db.Column(db.Integer, default=0, nullable=False)
    last_updated = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    product = db.relationship('Product', lazy='joined')

    @property
    def available_quantity(self):
        return self.quantity - self.reserved_quantity

    def is_low_stock(self, threshold):
        return self.quantity <= threshold

    def to_dict(self):
        return {
            'id': self.id,
            'productId': self.product_id,
            'driverId': self.driver_id,
            'quantity': self.quantity,
            'reservedQuantity': self.reserved_quantity,
            'availableQuantity': self.available_quantity,
            'lastUpdated': iso(self.last_updated),
            'product': self.product.to_dict() if self.product else None,
        }

    def __repr__(self):
        return f'<Inventory product={self.product_id} driver={self.driver_id} qty={self.quantity}>'
