"""Order business logic."""
import logging
from decimal import Decimal

from sqlalchemy.orm import joinedload, selectinload

from deliveryroute import db
from deliveryroute.models import Order, OrderItem, Customer, Product, User
from deliveryroute.services.numbering_service import NumberingService
from deliveryroute.services.audit_service import AuditService
from deliveryroute.utils import day_window, parse_datetime, to_decimal

logger = logging.getLogger(__name__)


class OrderService:
    @staticmethod
    def query_with_details():
        """Orders with customer and items (and each item's product) loaded up front."""
        return Order.query.options(
            joinedload(Order.customer),
            selectinload(Order.items).joinedload(OrderItem.product),
        )

    @staticmethod
    def list_orders(driver_id=None, status=None, day=None):
        query = OrderService.query_with_details()
        if driver_id:
            query = query.filter(Order.driver_id == driver_id)
        if status:
            query = query.filter(Order.status == status)
        if day:
            start, end = day_window(day)
            query = query.filter(Order.scheduled_date >= start, Order.scheduled_date < end)
        return query.order_by(Order.created_at.desc(), Order.id.desc()).all()

    @staticmethod
    def get_order(order_id):
        return (
            OrderService.query_with_details()
            .filter(Order.id == order_id)
            .first_or_404(description='Order not found')
        )

    @staticmethod
    def create_order(customer_id, scheduled_date, items_data, driver_id=None,
                     order_number=None, wms_order_code=None, notes=None, created_by_id=None):
        if db.session.get(Customer, customer_id) is None:
            raise ValueError(f'Customer {customer_id} does not exist')
        if driver_id is not None and db.session.get(User, driver_id) is None:
            raise ValueError(f'Driver {driver_id} does not exist')
        if not isinstance(items_data, list):
            raise ValueError('Items must be a list')

        order = Order(
            order_number=order_number or NumberingService.next_order_number(),
            wms_order_code=wms_order_code,
            customer_id=customer_id,
            driver_id=driver_id,
            status='pending',
            scheduled_date=parse_datetime(scheduled_date),
            notes=notes,
        )
        try:
            db.session.add(order)
            db.session.flush()
            total = Decimal('0')
            for row in items_data:
                item = OrderService._build_item(order, row)
                db.session.add(item)
                total += item.total_amount
            order.total_amount = total
            order.delivered_amount = Decimal('0')
            AuditService.log('order.create', 'Order', order.id, order.order_number, created_by_id)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info('Created order %s with total %s', order.order_number, order.total_amount)
        return OrderService.get_order(order.id)

    @staticmethod
    def _build_item(order, row):
        if not isinstance(row, dict):
            raise ValueError('Each item must be an object')
        try:
            product_id = int(row.get('productId'))
            quantity = int(row.get('quantity'))
        except (TypeError, ValueError):
            raise ValueError('Each item needs an integer productId and quantity')
        if quantity < 1:
            raise ValueError('Item quantity must be at least 1')
        product = db.session.get(Product, product_id)
        if product is None:
            raise ValueError(f'Product {product_id} does not exist')
        price = to_decimal(row.get('price'), default=product.price)
        return OrderItem(
            order_id=order.id,
            product_id=product.id,
            quantity=quantity,
            price=price,
            total_amount=price * quantity,
        )

    @staticmethod
    def update_order(order_id, changes):
        """Partial update; status changes go through the lifecycle guard.

        Only ``in_progress`` can be set here. Terminal statuses carry delivery
        evidence and are set by ``DeliveryService``.
        """
        order = db.get_or_404(Order, order_id, description='Order not found')
        try:
            if 'driver_id' in changes:
                driver_id = changes['driver_id']
                if driver_id is not None and db.session.get(User, driver_id) is None:
                    raise ValueError(f'Driver {driver_id} does not exist')
                order.driver_id = driver_id
            if changes.get('scheduled_date'):
                order.scheduled_date = parse_datetime(changes['scheduled_date'])
            if 'notes' in changes:
                order.notes = changes['notes']
            if changes.get('status') and changes['status'] != order.status:
                if changes['status'] in Order.TERMINAL_STATUSES:
                    raise ValueError(
                        f"Orders are marked {changes['status']} through the delivery endpoints"
                    )
                old_status = order.status
                order.transition_to(changes['status'])
                AuditService.log('order.status', 'Order', order.id, f'{old_status} -> {order.status}')
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return OrderService.get_order(order.id)

    @staticmethod
    def add_item(order_id, product_id, quantity, price=None):
        order = db.session.get(Order, order_id)
        if order is None:
            raise ValueError(f'Order {order_id} does not exist')
        if order.is_terminal:
            raise ValueError(f'Order {order.order_number} is already {order.status}')
        try:
            item = OrderService._build_item(
                order, {'productId': product_id, 'quantity': quantity, 'price': price},
            )
            db.session.add(item)
            order.total_amount = Decimal(order.total_amount or 0) + item.total_amount
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return item

    @staticmethod
    def update_item(item_id, changes):
        item = db.get_or_404(OrderItem, item_id, description='Order item not found')
        if item.order.is_terminal:
            raise ValueError(f'Order {item.order.order_number} is already {item.order.status}')
        try:
            if changes.get('delivered_quantity') is not None:
                qty = changes['delivered_quantity']
                if qty > item.quantity:
                    raise ValueError(f'Delivered quantity {qty} exceeds ordered quantity {item.quantity}')
                item.delivered_quantity = qty
            if 'partial_reason' in changes:
                item.partial_reason = changes['partial_reason'] or None
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return item
