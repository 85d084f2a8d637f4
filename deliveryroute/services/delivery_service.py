"""Delivery lifecycle: start, complete, not delivered, GPS capture.

Every operation loads the order, applies its writes and commits once, so a
failure anywhere (an unknown item id, a bad quantity, a database error)
leaves the order exactly as it was before the call.
"""
import logging
from datetime import datetime

from deliveryroute import db
from deliveryroute.services.audit_service import AuditService
from deliveryroute.services.order_service import OrderService

logger = logging.getLogger(__name__)


def _as_int(value, label):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f'{label} must be an integer')


class DeliveryService:
    @staticmethod
    def start(order_id, user_id=None):
        order = OrderService.get_order(order_id)
        if order.status == 'in_progress':
            return order
        try:
            order.transition_to('in_progress')
            AuditService.log('delivery.start', 'Order', order.id, order.order_number, user_id)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info('Delivery started for order %s', order.order_number)
        return order

    @staticmethod
    def complete(order_id, items_data=None, delivered_amount=None, signature_data=None,
                 photo_url=None, user_id=None):
        """Mark the order delivered and apply per-item delivered quantities in one transaction.

        ``items_data`` is a list of ``{"id", "deliveredQuantity", "partialReason"}``;
        items not listed keep their current delivered quantity. When
        ``delivered_amount`` is None it is computed from the delivered lines.
        """
        order = OrderService.get_order(order_id)
        if items_data is not None and not isinstance(items_data, list):
            raise ValueError('Items must be a list')
        items_by_id = {item.id: item for item in order.items}
        try:
            order.transition_to('delivered')
            for row in items_data or []:
                if not isinstance(row, dict):
                    raise ValueError('Each item must be an object')
                item_id = _as_int(row.get('id'), 'Item id')
                item = items_by_id.get(item_id)
                if item is None:
                    raise ValueError(f'Item {item_id} does not belong to order {order.order_number}')
                if row.get('deliveredQuantity') is not None:
                    qty = _as_int(row['deliveredQuantity'], 'Delivered quantity')
                    if qty < 0 or qty > item.quantity:
                        raise ValueError(
                            f'Delivered quantity for item {item_id} must be between 0 and {item.quantity}'
                        )
                    item.delivered_quantity = qty
                if 'partialReason' in row:
                    item.partial_reason = row['partialReason'] or None
            if delivered_amount is None:
                delivered_amount = order.delivered_items_total
            order.delivered_amount = delivered_amount
            order.delivered_at = datetime.utcnow()
            order.signature_data = signature_data
            order.photo_url = photo_url
            AuditService.log('delivery.complete', 'Order', order.id, order.order_number, user_id)
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.warning('Delivery completion for order %s rolled back', order_id)
            raise
        logger.info('Order %s delivered, amount %s', order.order_number, order.delivered_amount)
        return order

    @staticmethod
    def mark_not_delivered(order_id, reason, gps_latitude=None, gps_longitude=None, user_id=None):
        order = OrderService.get_order(order_id)
        try:
            order.transition_to('not_delivered')
            order.non_delivery_reason = reason
            if gps_latitude is not None and gps_longitude is not None:
                order.gps_latitude = gps_latitude
                order.gps_longitude = gps_longitude
            AuditService.log('delivery.not_delivered', 'Order', order.id, reason, user_id)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info('Order %s not delivered: %s', order.order_number, reason)
        return order

    @staticmethod
    def capture_gps(order_id, latitude, longitude):
        """Overwrite the order's GPS pair; allowed at any status."""
        order = OrderService.get_order(order_id)
        order.gps_latitude = latitude
        order.gps_longitude = longitude
        db.session.commit()
        return order
