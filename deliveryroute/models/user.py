"""User (driver) model."""
from datetime import datetime
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from deliveryroute import db
from deliveryroute.utils import iso


class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    email = db.Column(db.String(100), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='driver')
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    orders = db.relationship('Order', backref='driver', lazy='dynamic', foreign_keys='Order.driver_id')
    inventory = db.relationship('Inventory', backref='driver', lazy='dynamic')
    routes = db.relationship('Route', backref='driver', lazy='dynamic')

    ROLES = ['driver', 'admin']

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def has_role(self, *roles):
        return self.role in roles

    def is_admin(self):
        return self.role == 'admin'

    def to_dict(self):
        # password_hash never leaves the server
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'name': self.name,
            'role': self.role,
            'isActive': self.is_active,
            'createdAt': iso(self.created_at),
        }

    def __repr__(self):
        return f'<User {self.username}>'
