"""A driver's working day, from login to closeout."""
from decimal import Decimal


def test_driver_day(client, login):
    res = login(client, '1', '1')
    assert res.status_code == 200
    driver_id = res.get_json()['user']['id']

    pending = client.get(f'/api/orders?driverId={driver_id}&status=pending').get_json()
    assert len(pending) == 2
    order = sorted(pending, key=lambda o: o['orderNumber'])[0]

    res = client.post('/api/delivery/start', json={'orderId': order['id']})
    assert res.get_json()['status'] == 'in_progress'

    items = [{'id': i['id'], 'deliveredQuantity': i['quantity']} for i in order['items']]
    res = client.post('/api/delivery/complete', json={'orderId': order['id'], 'items': items})
    assert res.status_code == 200
    done = res.get_json()
    assert done['status'] == 'delivered'
    expected = sum((Decimal(i['price']) * i['quantity'] for i in order['items']), Decimal('0'))
    assert Decimal(done['deliveredAmount']) == expected
    assert done['deliveredAmount'] == '14900.00'

    stats = client.get(f'/api/statistics?driverId={driver_id}').get_json()
    assert (stats['pending'], stats['delivered']) == (1, 3)

    other = [o for o in pending if o['id'] != order['id']][0]
    res = client.post('/api/delivery/not-delivered', json={'orderId': other['id'], 'reason': 'No one home'})
    assert res.status_code == 200

    session = client.get(f'/api/route-sessions/active?driverId={driver_id}').get_json()
    res = client.post('/api/route-sessions/end', json={'sessionId': session['id'], 'endMileage': '12475.5'})
    assert res.status_code == 200
    report = res.get_json()['report']
    assert report['pendingOrders'] == 0
    assert report['deliveredOrders'] == 3
    assert report['notDeliveredOrders'] == 2
    assert report['distanceDriven'] == '25.0'

    assert client.post('/api/auth/logout').status_code == 200
    assert client.get(f'/api/statistics?driverId={driver_id}').status_code == 401
