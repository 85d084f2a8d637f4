"""Customers, products and planned routes."""


def test_products(driver_client, admin_client):
    products = driver_client.get('/api/products').get_json()
    assert len(products) == 5
    assert all(p['price'].count('.') == 1 and len(p['price'].split('.')[1]) == 2 for p in products)
    res = admin_client.post('/api/products', json={
        'code': 'LEC006', 'name': 'Leche 1L', 'price': 3900, 'unit': 'litros',
    })
    assert res.status_code == 201
    created = res.get_json()
    assert created['price'] == '3900.00'
    assert driver_client.get(f"/api/products/{created['id']}").get_json()['code'] == 'LEC006'


def test_duplicate_product_code(admin_client):
    res = admin_client.post('/api/products', json={'code': 'ACE001', 'name': 'Dup', 'price': 1})
    assert res.status_code == 400


def test_product_requires_price(admin_client):
    res = admin_client.post('/api/products', json={'code': 'X1', 'name': 'No price'})
    assert res.status_code == 400
    assert 'Price' in res.get_json()['error']


def test_customers(driver_client, admin_client):
    customers = driver_client.get('/api/customers').get_json()
    assert len(customers) == 3
    assert all(len(c['weeklyPattern']) == 7 for c in customers)

    res = admin_client.post('/api/customers', json={
        'name': 'Panadería Central',
        'address': 'Calle 10 #5-20',
        'email': 'central@example.com',
        'creditDays': 0,
        'weeklyPattern': [True, True, True, True, True, False, False],
    })
    assert res.status_code == 201
    customer = res.get_json()
    assert customer['creditDays'] == 0

    res = admin_client.patch(f"/api/customers/{customer['id']}", json={'phone': '555-0101', 'isActive': False})
    assert res.status_code == 200
    assert res.get_json()['phone'] == '555-0101'
    assert res.get_json()['isActive'] is False
    assert res.get_json()['name'] == 'Panadería Central'
    assert len(driver_client.get('/api/customers').get_json()) == 3


def test_customer_bad_weekly_pattern(admin_client):
    res = admin_client.post('/api/customers', json={
        'name': 'X', 'address': 'Y', 'weeklyPattern': [True, False],
    })
    assert res.status_code == 400


def test_customer_bad_email(admin_client):
    res = admin_client.post('/api/customers', json={'name': 'X', 'address': 'Y', 'email': 'nope'})
    assert res.status_code == 400


def test_customer_not_found(driver_client):
    assert driver_client.get('/api/customers/9999').status_code == 404


def test_routes(driver_client, admin_client, driver_id):
    routes = driver_client.get(f'/api/routes?driverId={driver_id}').get_json()
    assert [r['status'] for r in routes] == ['active', 'completed']
    assert len(routes[0]['waypoints']) == 3

    res = admin_client.post('/api/routes', json={
        'driverId': driver_id,
        'name': 'Ruta Centro',
        'date': '2025-03-11',
        'waypoints': [{'lat': 4.6, 'lng': -74.08}],
    })
    assert res.status_code == 201
    route = res.get_json()
    assert route['waypoints'] == [{'lat': 4.6, 'lng': -74.08}]

    res = driver_client.patch(f"/api/routes/{route['id']}", json={'status': 'completed', 'actualTime': 95})
    assert res.status_code == 200
    assert res.get_json()['status'] == 'completed'
    assert res.get_json()['actualTime'] == 95


def test_route_bad_waypoints(admin_client, driver_id):
    res = admin_client.post('/api/routes', json={
        'driverId': driver_id, 'name': 'R', 'date': '2025-03-11', 'waypoints': [{'lat': 'x'}],
    })
    assert res.status_code == 400


def test_missing_product_and_route(driver_client):
    res = driver_client.get('/api/products/9999')
    assert res.status_code == 404
    assert res.get_json()['error'] == 'Product not found'
    res = driver_client.patch('/api/routes/9999', json={'status': 'completed'})
    assert res.status_code == 404
    assert res.get_json()['error'] == 'Route not found'
    assert driver_client.patch('/api/order-items/9999', json={'deliveredQuantity': 1}).status_code == 404
