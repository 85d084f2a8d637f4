"""Order listing, creation and status updates."""
from deliveryroute.models import Order


def test_list_pending_orders_for_driver(driver_client, driver_id):
    res = driver_client.get(f'/api/orders?driverId={driver_id}&status=pending')
    assert res.status_code == 200
    orders = res.get_json()
    assert len(orders) == 2
    assert {o['status'] for o in orders} == {'pending'}
    first = orders[0]
    assert first['customer']['name']
    assert first['items'] and first['items'][0]['product']['code']


def test_list_unknown_status(driver_client):
    res = driver_client.get('/api/orders?status=cancelled')
    assert res.status_code == 400


def test_list_bad_date(driver_client):
    res = driver_client.get('/api/orders?date=10-03-2025')
    assert res.status_code == 400


def test_order_detail_not_found(driver_client):
    res = driver_client.get('/api/orders/9999')
    assert res.status_code == 404
    assert res.get_json()['error'] == 'Order not found'


def test_create_order(admin_client, driver_id):
    customers = admin_client.get('/api/customers').get_json()
    products = admin_client.get('/api/products').get_json()
    res = admin_client.post('/api/orders', json={
        'customerId': customers[0]['id'],
        'driverId': driver_id,
        'scheduledDate': '2025-03-10T09:00:00',
        'items': [
            {'productId': products[0]['id'], 'quantity': 2},
            {'productId': products[1]['id'], 'quantity': 1, 'price': '100.50'},
        ],
    })
    assert res.status_code == 201
    order = res.get_json()
    assert order['status'] == 'pending'
    assert order['orderNumber'].startswith('ORD-')
    expected = 2 * float(products[0]['price']) + 100.50
    assert float(order['totalAmount']) == expected
    assert len(order['items']) == 2


def test_create_order_unknown_product_writes_nothing(app, admin_client):
    customers = admin_client.get('/api/customers').get_json()
    with app.app_context():
        before = Order.query.count()
    res = admin_client.post('/api/orders', json={
        'customerId': customers[0]['id'],
        'scheduledDate': '2025-03-10',
        'items': [{'productId': 9999, 'quantity': 1}],
    })
    assert res.status_code == 400
    with app.app_context():
        assert Order.query.count() == before


def test_patch_status_follows_lifecycle(driver_client, pending_order):
    url = f"/api/orders/{pending_order['id']}"
    res = driver_client.patch(url, json={'status': 'in_progress'})
    assert res.status_code == 200
    assert res.get_json()['status'] == 'in_progress'
    res = driver_client.patch(url, json={'status': 'pending'})
    assert res.status_code == 400
    assert driver_client.get(url).get_json()['status'] == 'in_progress'


def test_patch_terminal_order_rejected(driver_client, driver_id):
    delivered = driver_client.get(f'/api/orders?driverId={driver_id}&status=delivered').get_json()[0]
    res = driver_client.patch(f"/api/orders/{delivered['id']}", json={'status': 'not_delivered'})
    assert res.status_code == 400


def test_patch_unknown_status(driver_client, pending_order):
    res = driver_client.patch(f"/api/orders/{pending_order['id']}", json={'status': 'lost'})
    assert res.status_code == 400


def test_update_item_delivered_quantity(driver_client, pending_order):
    item = pending_order['items'][0]
    url = f"/api/order-items/{item['id']}"
    res = driver_client.patch(url, json={'deliveredQuantity': 0, 'partialReason': 'Damaged'})
    assert res.status_code == 200
    assert res.get_json()['deliveredQuantity'] == 0
    assert res.get_json()['partialReason'] == 'Damaged'
    res = driver_client.patch(url, json={'deliveredQuantity': item['quantity'] + 1})
    assert res.status_code == 400


def test_add_item_to_order(admin_client, pending_order):
    products = admin_client.get('/api/products').get_json()
    res = admin_client.post('/api/order-items', json={
        'orderId': pending_order['id'], 'productId': products[0]['id'], 'quantity': 3,
    })
    assert res.status_code == 201
    assert res.get_json()['deliveredQuantity'] == 3
    order = admin_client.get(f"/api/orders/{pending_order['id']}").get_json()
    assert len(order['items']) == len(pending_order['items']) + 1


def test_patch_cannot_set_terminal_status(driver_client, pending_order):
    url = f"/api/orders/{pending_order['id']}"
    for status in ('delivered', 'not_delivered'):
        res = driver_client.patch(url, json={'status': status})
        assert res.status_code == 400
        assert 'delivery endpoints' in res.get_json()['error']
    order = driver_client.get(url).get_json()
    assert order['status'] == 'pending'
    assert order['deliveredAt'] is None


def test_items_locked_once_order_is_delivered(driver_client, pending_order):
    items = [{'id': i['id'], 'deliveredQuantity': i['quantity']} for i in pending_order['items']]
    done = driver_client.post('/api/delivery/complete', json={
        'orderId': pending_order['id'], 'items': items,
    }).get_json()
    item = done['items'][0]
    res = driver_client.patch(f"/api/order-items/{item['id']}", json={'deliveredQuantity': 0})
    assert res.status_code == 400
    order = driver_client.get(f"/api/orders/{pending_order['id']}").get_json()
    assert order['items'][0]['deliveredQuantity'] == item['quantity']
    assert order['deliveredAmount'] == done['deliveredAmount']
