"""Driver vehicle inventory."""
import logging
from datetime import datetime

from flask import abort, current_app
from sqlalchemy import func

from deliveryroute import db
from deliveryroute.models import Inventory, Product
from deliveryroute.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class InventoryService:
    @staticmethod
    def get_inventory(driver_id, low_stock_only=False):
        query = Inventory.query.join(Product).filter(Inventory.driver_id == driver_id)
        if low_stock_only:
            query = query.filter(Inventory.quantity <= current_app.config['LOW_STOCK_THRESHOLD'])
        return query.order_by(Product.name).all()

    @staticmethod
    def set_quantity(product_id, driver_id, quantity):
        """Absolute set of the on-hand quantity (not a delta)."""
        if quantity < 0:
            raise ValueError('Quantity cannot be negative')
        row = Inventory.query.filter_by(product_id=product_id, driver_id=driver_id).first()
        if row is None:
            abort(404, description='Inventory item not found')
        previous = row.quantity
        row.quantity = quantity
        row.last_updated = datetime.utcnow()
        AuditService.log(
            'inventory.set', 'Inventory', row.id, f'product {product_id}: {previous} -> {quantity}',
        )
        db.session.commit()
        logger.info('Driver %s inventory for product %s set %s -> %s', driver_id, product_id, previous, quantity)
        return row

    @staticmethod
    def total_units(driver_id):
        return int(
            db.session.query(func.coalesce(func.sum(Inventory.quantity), 0))
            .filter(Inventory.driver_id == driver_id)
            .scalar() or 0
        )

    @staticmethod
    def summary(driver_id):
        threshold = current_app.config['LOW_STOCK_THRESHOLD']
        rows = Inventory.query.filter_by(driver_id=driver_id).all()
        return {
            'driverId': driver_id,
            'totalProducts': len(rows),
            'availableProducts': sum(1 for r in rows if r.quantity > 0),
            'lowStockProducts': sum(1 for r in rows if r.is_low_stock(threshold)),
            'totalUnits': sum(r.quantity for r in rows),
        }
