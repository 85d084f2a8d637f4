"""Order and OrderItem models."""
from datetime import datetime
from decimal import Decimal

from deliveryroute import db
from deliveryroute.utils import coord, iso, money


class Order(db.Model):
    __tablename__ = 'orders'

    id = db.Column(db.Integer, primary_key=True)
    order_number = db.Column(db.String(50), unique=True, nullable=False, index=True)
    wms_order_code = db.Column(db.String(50), nullable=True, index=True)
    customer_id = db.Column(db.Integer, db.ForeignKey('customers.id'), nullable=False, index=True)
    driver_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)
    status = db.Column(db.String(20), default='pending', nullable=False, index=True)
    total_amount = db.Column(db.Numeric(12, 2), default=0, nullable=False)
    delivered_amount = db.Column(db.Numeric(12, 2), default=0, nullable=True)
    scheduled_date = db.Column(db.DateTime, nullable=False, index=True)
    delivered_at = db.Column(db.DateTime, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    non_delivery_reason = db.Column(db.String(200), nullable=True)
    signature_data = db.Column(db.Text, nullable=True)
    photo_url = db.Column(db.String(500), nullable=True)
    gps_latitude = db.Column(db.Numeric(10, 8), nullable=True)
    gps_longitude = db.Column(db.Numeric(11, 8), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    customer = db.relationship('Customer', back_populates='orders')
    items = db.relationship(
        'OrderItem', back_populates='order', cascade='all, delete-orphan', order_by='OrderItem.id',
    )

    STATUSES = ['pending', 'in_progress', 'delivered', 'not_delivered']
    TERMINAL_STATUSES = ('delivered', 'not_delivered')
    # Forward-only lifecycle; terminal states have no exits
    TRANSITIONS = {
        'pending': ('in_progress', 'delivered', 'not_delivered'),
        'in_progress': ('in_progress', 'delivered', 'not_delivered'),
        'delivered': (),
        'not_delivered': (),
    }

    def can_transition_to(self, status):
        return status in self.TRANSITIONS.get(self.status, ())

    def transition_to(self, status):
        if status not in self.STATUSES:
            raise ValueError(f'Unknown order status: {status}')
        if not self.can_transition_to(status):
            raise ValueError(f'Cannot change order {self.order_number} from {self.status} to {status}')
        self.status = status

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    @property
    def items_total(self):
        return sum((item.total_amount for item in self.items), Decimal('0'))

    @property
    def delivered_items_total(self):
        return sum((item.delivered_total for item in self.items), Decimal('0'))

    def to_dict(self, include_items=True):
        data = {
            'id': self.id,
            'orderNumber': self.order_number,
            'wmsOrderCode': self.wms_order_code,
            'customerId': self.customer_id,
            'driverId': self.driver_id,
            'status': self.status,
            'totalAmount': money(self.total_amount),
            'deliveredAmount': money(self.delivered_amount),
            'scheduledDate': iso(self.scheduled_date),
            'deliveredAt': iso(self.delivered_at),
            'notes': self.notes,
            'nonDeliveryReason': self.non_delivery_reason,
            'signatureData': self.signature_data,
            'photoUrl': self.photo_url,
            'gpsLatitude': coord(self.gps_latitude),
            'gpsLongitude': coord(self.gps_longitude),
            'createdAt': iso(self.created_at),
            'updatedAt': iso(self.updated_at),
        }
        if include_items:
            data['customer'] = self.customer.to_dict() if self.customer else None
            data['items'] = [item.to_dict() for item in self.items]
        return data

    def __repr__(self):
        return f'<Order {self.order_number}>'


class OrderItem(db.Model):
    __tablename__ = 'order_items'

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('orders.id'), nullable=False, index=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    delivered_quantity = db.Column(db.Integer, nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    total_amount = db.Column(db.Numeric(12, 2), nullable=False)
    partial_reason = db.Column(db.String(200), nullable=True)

    order = db.relationship('Order', back_populates='items')
    product = db.relationship('Product', back_populates='order_items')

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Until adjusted at the door the whole line counts as delivered
        if self.delivered_quantity is None:
            self.delivered_quantity = self.quantity

    @property
    def delivered_total(self):
        qty = self.delivered_quantity if self.delivered_quantity is not None else self.quantity
        return Decimal(qty) * Decimal(self.price)

    @property
    def is_partial(self):
        return self.delivered_quantity is not None and self.delivered_quantity < self.quantity

    def to_dict(self):
        return {
            'id': self.id,
            'orderId': self.order_id,
            'productId': self.product_id,
            'quantity': self.quantity,
            'deliveredQuantity': self.delivered_quantity,
            'price': money(self.price),
            'totalAmount': money(self.total_amount),
            'partialReason': self.partial_reason,
            'product': self.product.to_dict() if self.product else None,
        }

    def __repr__(self):
        return f'<OrderItem {self.product_id} x {self.quantity}>'
