"""Routes, route sessions and the end-of-day Z-closeout."""
import logging
from datetime import datetime, time
from decimal import Decimal

from deliveryroute import db
from deliveryroute.models import Route, RouteSession, DailyReport, Product, User
from deliveryroute.services.audit_service import AuditService
from deliveryroute.services.statistics_service import StatisticsService
from deliveryroute.utils import day_window, parse_datetime

logger = logging.getLogger(__name__)


class RouteService:
    @staticmethod
    def list_for_driver(driver_id):
        return Route.query.filter_by(driver_id=driver_id).order_by(Route.date.desc()).all()

    @staticmethod
    def validate_waypoints(waypoints):
        if waypoints is None:
            return []
        if not isinstance(waypoints, list):
            raise ValueError('Waypoints must be a list')
        cleaned = []
        for point in waypoints:
            if not isinstance(point, dict):
                raise ValueError('Each waypoint must be an object with lat and lng')
            try:
                entry = {'lat': float(point['lat']), 'lng': float(point['lng'])}
            except (KeyError, TypeError, ValueError):
                raise ValueError('Each waypoint needs numeric lat and lng')
            if point.get('orderId') is not None:
                entry['orderId'] = int(point['orderId'])
            cleaned.append(entry)
        return cleaned

    @staticmethod
    def create(driver_id, name, date, waypoints=None, status=None, total_distance=None, estimated_time=None):
        if db.session.get(User, driver_id) is None:
            raise ValueError(f'Driver {driver_id} does not exist')
        route = Route(
            driver_id=driver_id,
            name=name,
            date=parse_datetime(date),
            status=status or 'active',
            total_distance=total_distance,
            estimated_time=estimated_time,
            waypoints=RouteService.validate_waypoints(waypoints),
        )
        db.session.add(route)
        db.session.flush()
        AuditService.log('route.create', 'Route', route.id, route.name)
        db.session.commit()
        return route

    @staticmethod
    def update(route_id, changes):
        route = db.get_or_404(Route, route_id, description='Route not found')
        for key, value in changes.items():
            setattr(route, key, value)
        db.session.commit()
        return route


class RouteSessionService:
    @staticmethod
    def list_for_driver(driver_id):
        return (
            RouteSession.query.filter_by(driver_id=driver_id)
            .order_by(RouteSession.created_at.desc(), RouteSession.id.desc())
            .all()
        )

    @staticmethod
    def active_for_driver(driver_id):
        return RouteSession.query.filter_by(driver_id=driver_id, status='active').first()

    @staticmethod
    def start_session(route_id, driver_id, start_mileage, assistant_name=None):
        if db.session.get(Route, route_id) is None:
            raise ValueError(f'Route {route_id} does not exist')
        if db.session.get(User, driver_id) is None:
            raise ValueError(f'Driver {driver_id} does not exist')
        active = RouteSessionService.active_for_driver(driver_id)
        if active is not None:
            raise ValueError(f'Driver already has an active route session ({active.id})')
        session = RouteSession(
            route_id=route_id,
            driver_id=driver_id,
            assistant_name=assistant_name,
            start_mileage=start_mileage,
            started_at=datetime.utcnow(),
            status='active',
        )
        db.session.add(session)
        db.session.flush()
        AuditService.log('route_session.start', 'RouteSession', session.id, f'route {route_id}')
        db.session.commit()
        logger.info('Driver %s started route session %s on route %s', driver_id, session.id, route_id)
        return session

    @staticmethod
    def normalize_returned_inventory(entries):
        """Validate returned-inventory lines and snapshot product code and name onto each."""
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise ValueError('Returned inventory must be a list')
        cleaned = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError('Each returned inventory line must be an object')
            try:
                product_id = int(entry.get('productId'))
                quantity = int(entry.get('quantity', 0))
            except (TypeError, ValueError):
                raise ValueError('Returned inventory needs integer productId and quantity')
            if quantity < 0:
                raise ValueError('Returned quantity cannot be negative')
            return_type = entry.get('returnType') or 'warehouse'
            if return_type not in DailyReport.RETURN_TYPES:
                raise ValueError(f'Return type must be one of {", ".join(DailyReport.RETURN_TYPES)}')
            product = db.session.get(Product, product_id)
            if product is None:
                raise ValueError(f'Product {product_id} does not exist')
            cleaned.append({
                'productId': product.id,
                'productCode': product.code,
                'productName': product.name,
                'quantity': quantity,
                'returnType': return_type,
                'reason': entry.get('reason') or None,
            })
        return cleaned

    @staticmethod
    def end_session(session_id, end_mileage, inventory_returned=None, observations=None):
        """Close the session and write its DailyReport as one transaction."""
        session = db.session.get(RouteSession, session_id)
        if session is None:
            raise ValueError(f'Route session {session_id} was never started')
        if not session.is_active:
            raise ValueError(f'Route session {session_id} is already completed')
        end_mileage = Decimal(str(end_mileage))
        if end_mileage < Decimal(session.start_mileage):
            raise ValueError('End mileage cannot be lower than start mileage')
        returned = RouteSessionService.normalize_returned_inventory(inventory_returned)

        try:
            now = datetime.utcnow()
            session.end_mileage = end_mileage
            session.completed_at = now
            session.status = 'completed'

            working_day = session.started_at.date()
            counts = StatisticsService.order_counts(session.driver_id, working_day)
            report = DailyReport(
                session_id=session.id,
                driver_id=session.driver_id,
                date=datetime.combine(working_day, time.min),
                total_orders=sum(counts.values()),
                pending_orders=counts['pending'],
                in_progress_orders=counts['in_progress'],
                delivered_orders=counts['delivered'],
                not_delivered_orders=counts['not_delivered'],
                collected_amount=StatisticsService.collected_amount(session.driver_id, working_day),
                start_mileage=session.start_mileage,
                end_mileage=end_mileage,
                distance_driven=end_mileage - Decimal(session.start_mileage),
                inventory_returned=returned,
                observations=observations,
            )
            db.session.add(report)
            db.session.flush()
            AuditService.log('route_session.end', 'RouteSession', session.id, f'report {report.id}')
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.error('Closing route session %s failed; nothing was written', session_id, exc_info=True)
            raise
        logger.info('Route session %s closed, daily report %s', session.id, report.id)
        return session, report

    @staticmethod
    def list_reports(driver_id, day=None):
        query = DailyReport.query.filter(DailyReport.driver_id == driver_id)
        if day:
            start, end = day_window(day)
            query = query.filter(DailyReport.date >= start, DailyReport.date < end)
        return query.order_by(DailyReport.created_at.desc(), DailyReport.id.desc()).all()
