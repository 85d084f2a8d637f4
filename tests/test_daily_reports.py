"""Daily reports and the closeout PDF."""
from datetime import datetime, time, timedelta

import pytest

from deliveryroute import db
from deliveryroute.models import RouteSession


@pytest.fixture
def report(driver_client, driver_id):
    session = driver_client.get(f'/api/route-sessions/active?driverId={driver_id}').get_json()
    products = driver_client.get('/api/products').get_json()
    res = driver_client.post('/api/route-sessions/end', json={
        'sessionId': session['id'],
        'endMileage': 12500,
        'observations': 'Flat tyre <fixed>',
        'inventoryReturned': [{'productId': products[0]['id'], 'quantity': 3, 'reason': 'Expired'}],
    })
    assert res.status_code == 200
    return res.get_json()['report']


def test_list_reports(driver_client, driver_id, report):
    reports = driver_client.get(f'/api/daily-reports?driverId={driver_id}').get_json()
    assert [r['id'] for r in reports] == [report['id']]
    today = datetime.utcnow().date().isoformat()
    assert len(driver_client.get(f'/api/daily-reports?driverId={driver_id}&date={today}').get_json()) == 1
    assert driver_client.get(f'/api/daily-reports?driverId={driver_id}&date=2000-01-01').get_json() == []


def test_list_reports_requires_driver(driver_client):
    assert driver_client.get('/api/daily-reports').status_code == 400


def test_report_detail(driver_client, report):
    res = driver_client.get(f"/api/daily-reports/{report['id']}")
    assert res.status_code == 200
    assert res.get_json()['distanceDriven'] == '49.5'
    assert driver_client.get('/api/daily-reports/9999').status_code == 404


def test_report_pdf(driver_client, report):
    res = driver_client.get(f"/api/daily-reports/{report['id']}/pdf")
    assert res.status_code == 200
    assert res.mimetype == 'application/pdf'
    assert res.data.startswith(b'%PDF')
    assert 'attachment' in res.headers['Content-Disposition']
    assert driver_client.get('/api/daily-reports/9999/pdf').status_code == 404


def test_report_dated_by_working_day(app, driver_client, driver_id):
    yesterday = datetime.utcnow().date() - timedelta(days=1)
    with app.app_context():
        session = RouteSession.query.filter_by(driver_id=driver_id, status='active').one()
        session.started_at = datetime.combine(yesterday, time(18, 0))
        db.session.commit()
        session_id = session.id
    res = driver_client.post('/api/route-sessions/end', json={'sessionId': session_id, 'endMileage': 12460})
    assert res.status_code == 200
    report = res.get_json()['report']
    assert report['date'] == datetime.combine(yesterday, time.min).isoformat()
    # Today's seeded orders belong to a different working day
    assert report['totalOrders'] == 0

    listed = driver_client.get(f'/api/daily-reports?driverId={driver_id}&date={yesterday.isoformat()}').get_json()
    assert [r['id'] for r in listed] == [report['id']]
    today = datetime.utcnow().date().isoformat()
    assert driver_client.get(f'/api/daily-reports?driverId={driver_id}&date={today}').get_json() == []
