"""Route, RouteSession and DailyReport models."""
from datetime import datetime
from decimal import Decimal

from deliveryroute import db
from deliveryroute.utils import iso, mileage, money


class Route(db.Model):
    __tablename__ = 'routes'

    id = db.Column(db.Integer, primary_key=True)
    driver_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    date = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.String(20), default='active', nullable=False)
    total_distance = db.Column(db.Numeric(8, 2), nullable=True)
    estimated_time = db.Column(db.Integer, nullable=True)  # minutes
    actual_time = db.Column(db.Integer, nullable=True)  # minutes
    # [{"lat": .., "lng": .., "orderId": ..}]
    waypoints = db.Column(db.JSON, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    sessions = db.relationship('RouteSession', back_populates='route', lazy='dynamic')

    STATUSES = ['active', 'completed']

    def to_dict(self):
        return {
            'id': self.id,
            'driverId': self.driver_id,
            'name': self.name,
            'date': iso(self.date),
            'status': self.status,
            'totalDistance': money(self.total_distance),
            'estimatedTime': self.estimated_time,
            'actualTime': self.actual_time,
            'waypoints': self.waypoints or [],
            'createdAt': iso(self.created_at),
        }

    def __repr__(self):
        return f'<Route {self.name}>'


class RouteSession(db.Model):
    __tablename__ = 'route_sessions'

    id = db.Column(db.Integer, primary_key=True)
    route_id = db.Column(db.Integer, db.ForeignKey('routes.id'), nullable=False)
    driver_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    assistant_name = db.Column(db.String(100), nullable=True)
    start_mileage = db.Column(db.Numeric(10, 1), nullable=False)
    end_mileage = db.Column(db.Numeric(10, 1), nullable=True)
    started_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    completed_at = db.Column(db.DateTime, nullable=True)
    status = db.Column(db.String(20), default='active', nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    route = db.relationship('Route', back_populates='sessions')
    report = db.relationship('DailyReport', back_populates='session', uselist=False)

    STATUSES = ['active', 'completed']

    @property
    def is_active(self):
        return self.status == 'active'

    @property
    def distance_driven(self):
        if self.end_mileage is None:
            return None
        return Decimal(self.end_mileage) - Decimal(self.start_mileage)

    def to_dict(self):
        return {
            'id': self.id,
            'routeId': self.route_id,
            'driverId': self.driver_id,
            'assistantName': self.assistant_name,
            'startMileage': mileage(self.start_mileage),
            'endMileage': mileage(self.end_mileage),
            'startedAt': iso(self.started_at),
            'completedAt': iso(self.completed_at),
            'status': self.status,
            'createdAt': iso(self.created_at),
        }

    def __repr__(self):
        return f'<RouteSession {self.id} {self.status}>'


class DailyReport(db.Model):
    """Z-closeout: snapshot written when a route session ends."""
    __tablename__ = 'daily_reports'

    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.Integer, db.ForeignKey('route_sessions.id'), unique=True, nullable=False)
    driver_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    # Working day the session started on, at midnight
    date = db.Column(db.DateTime, nullable=False, index=True)
    total_orders = db.Column(db.Integer, default=0, nullable=False)
    pending_orders = db.Column(db.Integer, default=0, nullable=False)
    in_progress_orders = db.Column(db.Integer, default=0, nullable=False)
    delivered_orders = db.Column(db.Integer, default=0, nullable=False)
    not_delivered_orders = db.Column(db.Integer, default=0, nullable=False)
    collected_amount = db.Column(db.Numeric(12, 2), default=0, nullable=False)
    start_mileage = db.Column(db.Numeric(10, 1), nullable=True)
    end_mileage = db.Column(db.Numeric(10, 1), nullable=True)
    distance_driven = db.Column(db.Numeric(10, 1), nullable=True)
    # [{"productId": .., "quantity": .., "returnType": "warehouse"|"wms", "reason": ..}]
    inventory_returned = db.Column(db.JSON, nullable=False, default=list)
    observations = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    session = db.relationship('RouteSession', back_populates='report')
    driver = db.relationship('User')

    RETURN_TYPES = ['warehouse', 'wms']

    def to_dict(self):
        return {
            'id': self.id,
            'sessionId': self.session_id,
            'driverId': self.driver_id,
            'date': iso(self.date),
            'totalOrders': self.total_orders,
            'pendingOrders': self.pending_orders,
            'inProgressOrders': self.in_progress_orders,
            'deliveredOrders': self.delivered_orders,
            'notDeliveredOrders': self.not_delivered_orders,
            'collectedAmount': money(self.collected_amount),
            'startMileage': mileage(self.start_mileage),
            'endMileage': mileage(self.end_mileage),
            'distanceDriven': mileage(self.distance_driven),
            'inventoryReturned': self.inventory_returned or [],
            'observations': self.observations,
            'createdAt': iso(self.created_at),
        }

    def __repr__(self):
        return f'<DailyReport session={self.session_id}>'
