"""Database models."""
from deliveryroute.models.user import User
from deliveryroute.models.customer import Customer
from deliveryroute.models.product import Product
from deliveryroute.models.order import Order, OrderItem
from deliveryroute.models.inventory import Inventory
from deliveryroute.models.route import Route, RouteSession, DailyReport
from deliveryroute.models.audit import AuditLog

__all__ = [
    'User',
    'Customer',
    'Product',
    'Order',
    'OrderItem',
    'Inventory',
    'Route',
    'RouteSession',
    'DailyReport',
    'AuditLog',
]
