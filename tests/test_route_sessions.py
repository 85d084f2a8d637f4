"""Route sessions and the end-of-day closeout."""
from datetime import datetime
from decimal import Decimal

import pytest

from deliveryroute import db
from deliveryroute.models import DailyReport, Inventory, RouteSession
from deliveryroute.services import RouteSessionService, StatisticsService


@pytest.fixture
def active_session(driver_client, driver_id):
    return driver_client.get(f'/api/route-sessions/active?driverId={driver_id}').get_json()


def test_seeded_driver_has_active_session(active_session):
    assert active_session['status'] == 'active'
    assert active_session['startMileage'] == '12450.5'
    assert active_session['endMileage'] is None


def test_no_active_session_is_404(admin_client):
    res = admin_client.get('/api/route-sessions/active')
    assert res.status_code == 404


def test_second_active_session_rejected(driver_client, active_session):
    res = driver_client.post('/api/route-sessions/start', json={
        'routeId': active_session['routeId'], 'startMileage': 100,
    })
    assert res.status_code == 400
    assert 'active route session' in res.get_json()['error']


def test_start_session_unknown_route(admin_client):
    res = admin_client.post('/api/route-sessions/start', json={'routeId': 9999, 'startMileage': 1})
    assert res.status_code == 400


def test_end_session_writes_report(app, driver_client, driver_id, active_session):
    products = driver_client.get('/api/products').get_json()
    res = driver_client.post('/api/route-sessions/end', json={
        'sessionId': active_session['id'],
        'endMileage': '12480.0',
        'observations': 'Light traffic',
        'inventoryReturned': [
            {'productId': products[0]['id'], 'quantity': 2, 'returnType': 'wms', 'reason': 'Damaged'},
            {'productId': products[1]['id'], 'quantity': 1},
        ],
    })
    assert res.status_code == 200
    body = res.get_json()
    session, report = body['session'], body['report']
    assert session['status'] == 'completed'
    assert session['completedAt'] is not None
    assert report['sessionId'] == session['id']
    assert report['distanceDriven'] == '29.5'
    assert report['totalOrders'] == 5
    assert report['pendingOrders'] == 2
    assert report['deliveredOrders'] == 2
    assert report['notDeliveredOrders'] == 1
    assert report['observations'] == 'Light traffic'

    delivered = driver_client.get(f'/api/orders?driverId={driver_id}&status=delivered').get_json()
    assert Decimal(report['collectedAmount']) == sum(Decimal(o['deliveredAmount']) for o in delivered)

    returned = report['inventoryReturned']
    assert returned[0]['productCode'] == products[0]['code']
    assert returned[0]['returnType'] == 'wms'
    assert returned[1]['returnType'] == 'warehouse'
    # Returned stock is recorded, not moved
    with app.app_context():
        assert sorted(r.quantity for r in Inventory.query.all()) == [20, 28, 36, 44, 52]


def test_end_session_accepts_return_items_alias(driver_client, active_session):
    products = driver_client.get('/api/products').get_json()
    res = driver_client.post('/api/route-sessions/end', json={
        'sessionId': active_session['id'],
        'endMileage': 12460,
        'returnItems': [{'productId': products[0]['id'], 'quantity': 4}],
    })
    assert res.status_code == 200
    assert res.get_json()['report']['inventoryReturned'][0]['quantity'] == 4


def test_end_session_twice(driver_client, active_session):
    body = {'sessionId': active_session['id'], 'endMileage': 12460}
    assert driver_client.post('/api/route-sessions/end', json=body).status_code == 200
    res = driver_client.post('/api/route-sessions/end', json=body)
    assert res.status_code == 400
    assert 'already completed' in res.get_json()['error']


def test_end_session_never_started(driver_client):
    res = driver_client.post('/api/route-sessions/end', json={'sessionId': 9999, 'endMileage': 10})
    assert res.status_code == 400
    assert 'never started' in res.get_json()['error']


def test_end_mileage_below_start(driver_client, active_session):
    res = driver_client.post('/api/route-sessions/end', json={
        'sessionId': active_session['id'], 'endMileage': 100,
    })
    assert res.status_code == 400


def test_end_session_bad_return_type(app, driver_client, active_session):
    products = driver_client.get('/api/products').get_json()
    res = driver_client.post('/api/route-sessions/end', json={
        'sessionId': active_session['id'],
        'endMileage': 12460,
        'inventoryReturned': [{'productId': products[0]['id'], 'quantity': 1, 'returnType': 'bin'}],
    })
    assert res.status_code == 400
    with app.app_context():
        assert db.session.get(RouteSession, active_session['id']).status == 'active'


def test_failed_report_leaves_session_open(app, active_session, monkeypatch):
    def boom(driver_id, day):
        raise RuntimeError('database went away')

    monkeypatch.setattr(StatisticsService, 'collected_amount', staticmethod(boom))
    with app.app_context():
        with pytest.raises(RuntimeError):
            RouteSessionService.end_session(active_session['id'], Decimal('12500.0'))
    with app.app_context():
        session = db.session.get(RouteSession, active_session['id'])
        assert session.status == 'active'
        assert session.end_mileage is None
        assert session.completed_at is None
        assert DailyReport.query.count() == 0


def test_start_after_closing(driver_client, active_session):
    driver_client.post('/api/route-sessions/end', json={
        'sessionId': active_session['id'], 'endMileage': 12460,
    })
    res = driver_client.post('/api/route-sessions/start', json={
        'routeId': active_session['routeId'], 'startMileage': '12460.0', 'assistantName': 'Pedro',
    })
    assert res.status_code == 201
    session = res.get_json()
    assert session['status'] == 'active'
    assert session['assistantName'] == 'Pedro'
    assert datetime.fromisoformat(session['startedAt']).date() == datetime.utcnow().date()


def test_list_sessions(driver_client, driver_id, active_session):
    sessions = driver_client.get(f'/api/route-sessions?driverId={driver_id}').get_json()
    assert [s['id'] for s in sessions] == [active_session['id']]


def test_active_defaults_to_current_driver(driver_client, active_session):
    assert driver_client.get('/api/route-sessions/active').get_json()['id'] == active_session['id']
