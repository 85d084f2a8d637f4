"""Demo data: one driver (username 1, password 1) with a day of work."""
import logging
from datetime import datetime, timedelta
from decimal import Decimal

from deliveryroute import db
from deliveryroute.models import (
    User, Customer, Product, Order, OrderItem, Inventory, Route, RouteSession,
)

logger = logging.getLogger(__name__)

CUSTOMERS = [
    {
        'name': 'Tienda El Progreso',
        'contact': 'María González',
        'phone': '+57 300 123 4567',
        'email': 'maria@elprogreso.com',
        'address': 'Calle 45 #23-67, Barrio San Pedro',
        'latitude': Decimal('4.6097102'),
        'longitude': Decimal('-74.0817500'),
        'schedule': '8:00 AM - 12:00 PM',
        'credit_days': 30,
        'weekly_pattern': [True, False, True, False, True, False, False],
    },
    {
        'name': 'Supermercado La Esquina',
        'contact': 'Carlos Rodríguez',
        'phone': '+57 300 234 5678',
        'email': 'carlos@laesquina.com',
        'address': 'Carrera 15 #34-89, Centro',
        'latitude': Decimal('4.6112745'),
        'longitude': Decimal('-74.0807398'),
        'schedule': '9:00 AM - 1:00 PM',
        'credit_days': 15,
        'weekly_pattern': [False, True, False, True, False, True, False],
    },
    {
        'name': 'Distribuidora Norte',
        'contact': 'Ana López',
        'phone': '+57 300 345 6789',
        'email': 'ana@norte.com',
        'address': 'Avenida 68 #12-34, Zona Industrial',
        'latitude': Decimal('4.6127846'),
        'longitude': Decimal('-74.0798765'),
        'schedule': '7:00 AM - 11:00 AM',
        'credit_days': 45,
        'weekly_pattern': [True, True, False, True, True, False, False],
    },
]

PRODUCTS = [
    ('ACE001', 'WMS-ACE-001', 'Aceite de Cocina Premium 1L', 'aceites', '8500.00', 'litros'),
    ('ARR002', 'WMS-ARR-002', 'Arroz Diana 500g', 'granos', '3200.00', 'kilogramos'),
    ('SAL003', 'WMS-SAL-003', 'Sal Refisal 500g', 'condimentos', '1800.00', 'kilogramos'),
    ('AZU004', 'WMS-AZU-004', 'Azúcar Manuelita 1kg', 'condimentos', '4500.00', 'kilogramos'),
    ('FRI005', 'WMS-FRI-005', 'Fríjol Rojo 500g', 'granos', '6200.00', 'kilogramos'),
]

# Status of the five seeded orders, in scheduling order
ORDER_STATUSES = ['pending', 'pending', 'delivered', 'delivered', 'not_delivered']


class SeedService:
    @staticmethod
    def seed(today=None):
        """Populate an empty database. Returns a summary dict, or None when users already exist."""
        if User.query.count() > 0:
            return None
        today = today or datetime.utcnow().date()
        day_start = datetime.combine(today, datetime.min.time())

        driver = User(username='1', email='driver@deliveryroute.com', name='Juan Pérez', role='driver')
        driver.set_password('1')
        admin = User(username='admin', email='admin@deliveryroute.com', name='Administrador', role='admin')
        admin.set_password('admin')
        db.session.add_all([driver, admin])

        customers = [Customer(**data) for data in CUSTOMERS]
        products = [
            Product(code=code, wms_product_code=wms, name=name, category=category,
                    price=Decimal(price), unit=unit)
            for code, wms, name, category, price, unit in PRODUCTS
        ]
        db.session.add_all(customers + products)
        db.session.flush()

        for index, product in enumerate(products):
            db.session.add(Inventory(
                product_id=product.id,
                driver_id=driver.id,
                quantity=20 + index * 8,
                reserved_quantity=index,
            ))

        orders = []
        for i, status in enumerate(ORDER_STATUSES):
            order = Order(
                order_number=f'ORD-{i + 1:03d}',
                wms_order_code=f'WMS-ORD-{i + 1:03d}',
                customer_id=customers[i % len(customers)].id,
                driver_id=driver.id,
                status=status,
                scheduled_date=day_start + timedelta(hours=8 + i * 2),
                delivered_at=datetime.utcnow() if status == 'delivered' else None,
                non_delivery_reason='Cliente cerrado' if status == 'not_delivered' else None,
            )
            db.session.add(order)
            db.session.flush()
            total = Decimal('0')
            for j in range(2 + i % 3):
                product = products[j % len(products)]
                quantity = (i + j) % 5 + 1
                line_total = product.price * quantity
                total += line_total
                db.session.add(OrderItem(
                    order_id=order.id,
                    product_id=product.id,
                    quantity=quantity,
                    delivered_quantity=0 if status == 'not_delivered' else quantity,
                    price=product.price,
                    total_amount=line_total,
                ))
            order.total_amount = total
            order.delivered_amount = total if status == 'delivered' else Decimal('0')
            orders.append(order)

        active_route = Route(
            driver_id=driver.id,
            name='Ruta Norte - Zona Comercial',
            date=day_start,
            status='active',
            total_distance=Decimal('12.5'),
            estimated_time=240,
            waypoints=[
                {'lat': float(c.latitude), 'lng': float(c.longitude), 'orderId': o.id}
                for c, o in zip(customers, orders)
            ],
        )
        completed_route = Route(
            driver_id=driver.id,
            name='Ruta Sur - Zona Industrial',
            date=day_start - timedelta(days=1),
            status='completed',
            total_distance=Decimal('18.3'),
            estimated_time=300,
            actual_time=285,
            waypoints=[
                {'lat': 4.5897102, 'lng': -74.0917500},
                {'lat': 4.5812745, 'lng': -74.0907398},
            ],
        )
        db.session.add_all([active_route, completed_route])
        db.session.flush()

        db.session.add(RouteSession(
            route_id=active_route.id,
            driver_id=driver.id,
            assistant_name='María González',
            start_mileage=Decimal('12450.5'),
            status='active',
            started_at=datetime.utcnow(),
        ))
        db.session.commit()

        summary = {
            'users': 2,
            'customers': len(customers),
            'products': len(products),
            'orders': len(orders),
            'routes': 2,
        }
        logger.info('Seeded database: %s', summary)
        return summary
