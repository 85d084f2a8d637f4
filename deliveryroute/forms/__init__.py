"""Flask-WTF forms, bound to JSON bodies through ``bind_json``."""
from deliveryroute.forms.base import bind_json, first_error, json_payload, provided_data
from deliveryroute.forms.auth import LoginForm
from deliveryroute.forms.catalog import CustomerForm, CustomerUpdateForm, ProductForm
from deliveryroute.forms.order import OrderForm, OrderUpdateForm, OrderItemForm, OrderItemUpdateForm
from deliveryroute.forms.delivery import (
    DeliveryStartForm, DeliveryCompleteForm, NotDeliveredForm, CaptureGpsForm,
)
from deliveryroute.forms.inventory import InventoryForm
from deliveryroute.forms.route import (
    RouteForm, RouteUpdateForm, RouteSessionStartForm, RouteSessionEndForm,
)

__all__ = [
    'bind_json',
    'first_error',
    'json_payload',
    'provided_data',
    'LoginForm',
    'CustomerForm',
    'CustomerUpdateForm',
    'ProductForm',
    'OrderForm',
    'OrderUpdateForm',
    'OrderItemForm',
    'OrderItemUpdateForm',
    'DeliveryStartForm',
    'DeliveryCompleteForm',
    'NotDeliveredForm',
    'CaptureGpsForm',
    'InventoryForm',
    'RouteForm',
    'RouteUpdateForm',
    'RouteSessionStartForm',
    'RouteSessionEndForm',
]
