"""Order numbers: PREFIX-YYYYMM-NNNN, restarting at 0001 each month."""
from datetime import datetime

from flask import current_app

from deliveryroute import db
from deliveryroute.models import Order


class NumberingService:
    @staticmethod
    def next_order_number(now=None):
        now = now or datetime.utcnow()
        prefix = f"{current_app.config['ORDER_NUMBER_PREFIX']}-{now:%Y%m}-"
        numbers = db.session.query(Order.order_number).filter(Order.order_number.like(prefix + '%'))
        last = 0
        # Hand-entered numbers sharing the prefix but not ending in digits are skipped
        for (number,) in numbers:
            suffix = number[len(prefix):]
            if suffix.isdigit():
                last = max(last, int(suffix))
        return f'{prefix}{last + 1:04d}'
