"""Customer model."""
from datetime import datetime

from deliveryroute import db
from deliveryroute.utils import coord, iso


class Customer(db.Model):
    __tablename__ = 'customers'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    contact = db.Column(db.String(100), nullable=True)
    phone = db.Column(db.String(20), nullable=True)
    email = db.Column(db.String(100), nullable=True)
    address = db.Column(db.Text, nullable=False)
    latitude = db.Column(db.Numeric(10, 8), nullable=True)
    longitude = db.Column(db.Numeric(11, 8), nullable=True)
    schedule = db.Column(db.String(100), nullable=True)
    credit_days = db.Column(db.Integer, default=0)
    last_visit = db.Column(db.DateTime, nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    # Seven booleans, Monday first
    weekly_pattern = db.Column(db.JSON, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    orders = db.relationship('Order', back_populates='customer', lazy='dynamic')

    WEEKDAYS = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']

    def visits_on(self, day):
        """True when the weekly pattern schedules a visit on ``day``."""
        if not self.weekly_pattern:
            return False
        return bool(self.weekly_pattern[day.weekday()])

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'contact': self.contact,
            'phone': self.phone,
            'email': self.email,
            'address': self.address,
            'latitude': coord(self.latitude),
            'longitude': coord(self.longitude),
            'schedule': self.schedule,
            'creditDays': self.credit_days,
            'lastVisit': iso(self.last_visit),
            'isActive': self.is_active,
            'weeklyPattern': self.weekly_pattern,
            'createdAt': iso(self.created_at),
        }

    def __repr__(self):
        return f'<Customer {self.name}>'
