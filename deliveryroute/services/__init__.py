"""Business logic services."""
from deliveryroute.services.order_service import OrderService
from deliveryroute.services.delivery_service import DeliveryService
from deliveryroute.services.inventory_service import InventoryService
from deliveryroute.services.product_service import ProductService, CustomerService
from deliveryroute.services.route_service import RouteService, RouteSessionService
from deliveryroute.services.statistics_service import StatisticsService
from deliveryroute.services.numbering_service import NumberingService
from deliveryroute.services.audit_service import AuditService
from deliveryroute.services.seed_service import SeedService

__all__ = [
    'OrderService',
    'DeliveryService',
    'InventoryService',
    'ProductService',
    'CustomerService',
    'RouteService',
    'RouteSessionService',
    'StatisticsService',
    'NumberingService',
    'AuditService',
    'SeedService',
]
