"""Demo seed data and the seed-db command."""
import pytest

from deliveryroute import create_app, db
from deliveryroute.models import User, Order, Product, Route, RouteSession
from deliveryroute.services import SeedService


@pytest.fixture
def empty_app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


def test_seed_db_command(empty_app):
    result = empty_app.test_cli_runner().invoke(args=['seed-db'])
    assert result.exit_code == 0
    assert 'Created 5 orders' in result.output
    with empty_app.app_context():
        driver = User.query.filter_by(username='1').one()
        assert driver.check_password('1')
        assert driver.role == 'driver'
        assert User.query.filter_by(username='admin').one().is_admin()
        assert Product.query.count() == 5
        assert Route.query.count() == 2
        assert RouteSession.query.filter_by(status='active').count() == 1
        assert [o.status for o in Order.query.order_by(Order.order_number)] == [
            'pending', 'pending', 'delivered', 'delivered', 'not_delivered',
        ]


def test_seed_is_skipped_when_users_exist(runner):
    result = runner.invoke(args=['seed-db'])
    assert result.exit_code == 0
    assert 'nothing seeded' in result.output


def test_seeded_delivered_orders_are_consistent(app_ctx):
    assert SeedService.seed() is None
    for order in Order.query.filter_by(status='delivered'):
        assert order.delivered_amount == order.total_amount == order.items_total
        assert order.delivered_at is not None
    not_delivered = Order.query.filter_by(status='not_delivered').one()
    assert not_delivered.non_delivery_reason
    assert all(item.delivered_quantity == 0 for item in not_delivered.items)
