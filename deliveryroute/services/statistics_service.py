"""Per-driver daily order statistics."""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func

from deliveryroute import db
from deliveryroute.models import Order
from deliveryroute.services.inventory_service import InventoryService
from deliveryroute.utils import day_window


class StatisticsService:
    @staticmethod
    def order_counts(driver_id, day):
        """Orders scheduled for ``day`` grouped by status; every status is present."""
        start, end = day_window(day)
        rows = (
            db.session.query(Order.status, func.count(Order.id))
            .filter(
                Order.driver_id == driver_id,
                Order.scheduled_date >= start,
                Order.scheduled_date < end,
            )
            .group_by(Order.status)
            .all()
        )
        counts = {status: 0 for status in Order.STATUSES}
        for status, count in rows:
            counts[status] = count
        return counts

    @staticmethod
    def collected_amount(driver_id, day):
        start, end = day_window(day)
        total = (
            db.session.query(func.coalesce(func.sum(Order.delivered_amount), 0))
            .filter(
                Order.driver_id == driver_id,
                Order.status == 'delivered',
                Order.scheduled_date >= start,
                Order.scheduled_date < end,
            )
            .scalar()
        )
        return Decimal(str(total or 0))

    @staticmethod
    def get_order_statistics(driver_id, day=None):
        # Status counts are scoped to the day; totalInventory is the current on-hand stock.
        day = day or datetime.utcnow().date()
        counts = StatisticsService.order_counts(driver_id, day)
        return {
            'driverId': driver_id,
            'date': day.isoformat(),
            'pending': counts['pending'],
            'inProgress': counts['in_progress'],
            'delivered': counts['delivered'],
            'notDelivered': counts['not_delivered'],
            'total': sum(counts.values()),
            'totalInventory': InventoryService.total_units(driver_id),
        }
