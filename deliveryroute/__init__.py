"""Flask application factory."""
import logging
import os
import time

import click
from flask import Flask, g, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager

from config import config

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()

logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger(__name__).setLevel(app.config['LOG_LEVEL'])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    from deliveryroute.models import User

    @login_manager.user_loader
    def load_user(user_id):
        user = db.session.get(User, int(user_id))
        return user if user is not None and user.is_active else None

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Not authenticated'}), 401

    # Register blueprints
    from deliveryroute.blueprints.auth import auth_bp
    from deliveryroute.blueprints.orders import orders_bp
    from deliveryroute.blueprints.order_items import order_items_bp
    from deliveryroute.blueprints.delivery import delivery_bp
    from deliveryroute.blueprints.inventory import inventory_bp
    from deliveryroute.blueprints.customers import customers_bp
    from deliveryroute.blueprints.products import products_bp
    from deliveryroute.blueprints.driver_routes import driver_routes_bp
    from deliveryroute.blueprints.route_sessions import route_sessions_bp
    from deliveryroute.blueprints.statistics import statistics_bp
    from deliveryroute.blueprints.daily_reports import daily_reports_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(orders_bp, url_prefix='/api/orders')
    app.register_blueprint(order_items_bp, url_prefix='/api/order-items')
    app.register_blueprint(delivery_bp, url_prefix='/api/delivery')
    app.register_blueprint(inventory_bp, url_prefix='/api/inventory')
    app.register_blueprint(customers_bp, url_prefix='/api/customers')
    app.register_blueprint(products_bp, url_prefix='/api/products')
    app.register_blueprint(driver_routes_bp, url_prefix='/api/routes')
    app.register_blueprint(route_sessions_bp, url_prefix='/api/route-sessions')
    app.register_blueprint(statistics_bp, url_prefix='/api/statistics')
    app.register_blueprint(daily_reports_bp, url_prefix='/api/daily-reports')

    # Error handlers
    from deliveryroute.blueprints.errors import register_error_handlers
    register_error_handlers(app)

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_api_request(response):
        if request.path.startswith('/api'):
            started = g.get('request_started', time.perf_counter())
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info('%s %s %s in %dms', request.method, request.path, response.status_code, elapsed_ms)
        return response

    @app.route('/health')
    def health():
        return jsonify({'ok': True, 'service': 'delivery-route-api'})

    @app.cli.command('seed-db')
    def seed_db():
        """Load the demo driver, customers, products, orders and routes."""
        from deliveryroute.services import SeedService
        summary = SeedService.seed()
        if summary is None:
            click.echo('Database already has users; nothing seeded.')
            return
        for name, count in summary.items():
            click.echo(f'Created {count} {name}')

    # Auto-create tables; ignore "already exists" when several workers start together.
    with app.app_context():
        try:
            db.create_all()
        except Exception as e:
            if "already exists" in str(e).lower() or "duplicate key" in str(e).lower():
                logger.debug('Tables already present: %s', e)
            else:
                raise

    return app
