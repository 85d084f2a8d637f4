"""Shared fixtures: a seeded in-memory app and logged-in clients."""
import pytest

from deliveryroute import create_app, db
from deliveryroute.models import User
from deliveryroute.services import SeedService


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        SeedService.seed()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield


def _login(client, username, password):
    return client.post('/api/auth/login', json={'username': username, 'password': password})


@pytest.fixture
def login():
    return _login


@pytest.fixture
def driver_id(app):
    with app.app_context():
        return User.query.filter_by(username='1').one().id


@pytest.fixture
def driver_client(app):
    client = app.test_client()
    assert _login(client, '1', '1').status_code == 200
    return client


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    assert _login(client, 'admin', 'admin').status_code == 200
    return client


@pytest.fixture
def pending_order(driver_client, driver_id):
    """The first pending order seeded for the demo driver."""
    orders = driver_client.get(f'/api/orders?driverId={driver_id}&status=pending').get_json()
    return sorted(orders, key=lambda o: o['orderNumber'])[0]
