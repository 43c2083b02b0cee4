"""
Tests for stock validation and order persistence.
"""
from decimal import Decimal

import pytest
from django.db import DatabaseError

from shared.exceptions import InsufficientStockError, PersistenceError
from modules.orders import services
from modules.orders.models import OrderModel, OrderItemModel
from modules.orders.services import OrderService, validate_stock
from modules.products.exceptions import ProductNotFoundError
from modules.products.models import ProductModel


pytestmark = pytest.mark.django_db


@pytest.fixture
def order_service():
    return OrderService()


def _place(order_service, user, items, shipping_address):
    return order_service.place_order(
        user_id=user.id,
        order_items=items,
        shipping_address=shipping_address,
        payment_method='PayPal',
    )


class TestValidateStock:

    def test_overrides_client_fields_with_product_record(self, make_product):
        product = make_product(name='Lamp', price='25.50', count_in_stock=4)

        result = validate_stock([
            {'product': product.id, 'qty': 2, 'name': 'fake', 'price': Decimal('0.01'), 'image': 'x'},
        ])

        assert result == [{
            'product': product.id,
            'qty': 2,
            'name': 'Lamp',
            'price': Decimal('25.50'),
            'image': '/images/lamp.jpg',
        }]

    def test_unknown_product(self, make_product):
        make_product()

        with pytest.raises(ProductNotFoundError) as exc_info:
            validate_stock([{'product': 999999, 'qty': 1}])

        assert exc_info.value.entity_id == '999999'
        assert exc_info.value.status_code == 404

    def test_soft_deleted_product_is_not_found(self, make_product):
        from django.utils import timezone
        product = make_product(deleted_at=timezone.now())

        with pytest.raises(ProductNotFoundError):
            validate_stock([{'product': product.id, 'qty': 1}])

    def test_quantity_above_stock(self, make_product):
        product = make_product(name='Chair', count_in_stock=2)

        with pytest.raises(InsufficientStockError) as exc_info:
            validate_stock([{'product': product.id, 'qty': 3}])

        assert exc_info.value.available == 2
        assert exc_info.value.message == 'Insufficient stock for Chair. Available: 2'

    def test_quantity_equal_to_stock_is_allowed(self, make_product):
        product = make_product(count_in_stock=2)

        assert validate_stock([{'product': product.id, 'qty': 2}])[0]['qty'] == 2


class TestPlaceOrder:

    def test_persists_order_and_decrements_stock(self, order_service, user, make_product, shipping_address):
        product = make_product(price='20.00', count_in_stock=5)

        order = _place(order_service, user, [{'product': product.id, 'qty': 2}], shipping_address)

        product.refresh_from_db()
        assert product.count_in_stock == 3
        assert order.user_id == user.id
        assert order.items_price == Decimal('40.00')
        assert order.shipping_price == Decimal('10.00')
        assert order.tax_price == Decimal('6.00')
        assert order.total_price == Decimal('56.00')
        assert order.shipping_address == shipping_address
        assert order.is_paid is False
        assert order.is_delivered is False

    def test_duplicate_lines_become_one_item(self, order_service, user, make_product, shipping_address):
        product = make_product(count_in_stock=10)

        order = _place(order_service, user, [
            {'product': product.id, 'qty': 1},
            {'product': product.id, 'qty': 4},
        ], shipping_address)

        items = list(order.items.all())
        assert len(items) == 1
        assert items[0].qty == 5
        product.refresh_from_db()
        assert product.count_in_stock == 5

    def test_item_snapshot_uses_product_price(self, order_service, user, make_product, shipping_address):
        first = make_product(name='A', price='60.00')
        second = make_product(name='B', price='50.00')

        order = _place(order_service, user, [
            {'product': first.id, 'qty': 1, 'price': Decimal('1.00')},
            {'product': second.id, 'qty': 1, 'price': Decimal('1.00')},
        ], shipping_address)

        assert [(item.name, item.price) for item in order.items.all()] == [
            ('A', Decimal('60.00')),
            ('B', Decimal('50.00')),
        ]
        assert order.total_price == Decimal('126.50')

    def test_insufficient_stock_persists_nothing(self, order_service, user, make_product, shipping_address):
        plenty = make_product(name='Plenty', count_in_stock=10)
        scarce = make_product(name='Scarce', count_in_stock=1)

        with pytest.raises(InsufficientStockError):
            _place(order_service, user, [
                {'product': plenty.id, 'qty': 1},
                {'product': scarce.id, 'qty': 2},
            ], shipping_address)

        assert OrderModel.objects.count() == 0
        assert OrderItemModel.objects.count() == 0
        assert ProductModel.objects.get(id=plenty.id).count_in_stock == 10
        assert ProductModel.objects.get(id=scarce.id).count_in_stock == 1

    def test_unknown_product_persists_nothing(self, order_service, user, make_product, shipping_address):
        product = make_product(count_in_stock=3)

        with pytest.raises(ProductNotFoundError):
            _place(order_service, user, [
                {'product': product.id, 'qty': 1},
                {'product': product.id + 1000, 'qty': 1},
            ], shipping_address)

        assert OrderModel.objects.count() == 0
        product.refresh_from_db()
        assert product.count_in_stock == 3

    def test_stock_taken_after_validation_rolls_back(
        self, order_service, user, make_product, shipping_address, monkeypatch,
    ):
        first = make_product(name='First', count_in_stock=5)
        second = make_product(name='Second', count_in_stock=5)
        stale_snapshot = [first, second]

        # Another checkout drains the second product after this one validated.
        ProductModel.objects.filter(id=second.id).update(count_in_stock=1)
        monkeypatch.setattr(services.product_service, 'get_products_by_ids', lambda ids: stale_snapshot)

        with pytest.raises(InsufficientStockError) as exc_info:
            _place(order_service, user, [
                {'product': first.id, 'qty': 2},
                {'product': second.id, 'qty': 3},
            ], shipping_address)

        assert exc_info.value.available == 1
        assert OrderModel.objects.count() == 0
        assert ProductModel.objects.get(id=first.id).count_in_stock == 5
        assert ProductModel.objects.get(id=second.id).count_in_stock == 1

    def test_two_checkouts_for_full_stock_only_one_succeeds(
        self, order_service, user, staff_user, make_product, shipping_address, monkeypatch,
    ):
        product = make_product(count_in_stock=3)
        snapshot = [ProductModel.objects.get(id=product.id)]
        # Both checkouts see the same pre-order stock level.
        monkeypatch.setattr(services.product_service, 'get_products_by_ids', lambda ids: snapshot)

        _place(order_service, user, [{'product': product.id, 'qty': 3}], shipping_address)
        with pytest.raises(InsufficientStockError):
            _place(order_service, staff_user, [{'product': product.id, 'qty': 3}], shipping_address)

        assert OrderModel.objects.count() == 1
        product.refresh_from_db()
        assert product.count_in_stock == 0

    def test_storage_failure_raises_persistence_error(
        self, order_service, user, make_product, shipping_address, monkeypatch,
    ):
        product = make_product(count_in_stock=5)

        def fail(**kwargs):
            raise DatabaseError('connection lost')

        monkeypatch.setattr(OrderModel.objects, 'create', fail)

        with pytest.raises(PersistenceError) as exc_info:
            _place(order_service, user, [{'product': product.id, 'qty': 1}], shipping_address)

        assert exc_info.value.status_code == 500
        product.refresh_from_db()
        assert product.count_in_stock == 5


class TestOrderQueries:

    @pytest.fixture
    def order(self, order_service, user, make_product, shipping_address):
        product = make_product(price='30.00', count_in_stock=10)
        return _place(order_service, user, [{'product': product.id, 'qty': 1}], shipping_address)

    def test_order_hidden_from_other_users(self, order_service, order, django_user_model):
        from modules.orders.exceptions import OrderNotFoundError
        stranger = django_user_model.objects.create_user(
            email='other@example.com', username='other', password='pass12345',
        )

        with pytest.raises(OrderNotFoundError):
            order_service.get_order_for_user(order.id, stranger)

    def test_admin_sees_any_order(self, order_service, order, staff_user):
        assert order_service.get_order_for_user(order.id, staff_user).id == order.id

    def test_mark_paid_records_payment(self, order_service, order, user):
        paid = order_service.mark_paid(order.id, user, {
            'id': 'PAY-1',
            'status': 'COMPLETED',
            'update_time': '2024-01-01T00:00:00Z',
            'payer': {'email_address': 'payer@example.com'},
        })

        assert paid.is_paid is True
        assert paid.paid_at is not None
        assert paid.payment_result == {
            'id': 'PAY-1',
            'status': 'COMPLETED',
            'update_time': '2024-01-01T00:00:00Z',
            'email_address': 'payer@example.com',
        }

    def test_mark_delivered_twice_refreshes_timestamp(self, order_service, order):
        first = order_service.mark_delivered(order.id).delivered_at
        second = order_service.mark_delivered(order.id)

        assert second.is_delivered is True
        assert second.delivered_at >= first

    def test_deliver_from_read_before_payment_keeps_payment(self, order_service, order, user, monkeypatch):
        read_before_payment = order_service.get_order_by_id(order.id)
        order_service.mark_paid(order.id, user, {'id': 'PAY-3', 'status': 'COMPLETED'})

        monkeypatch.setattr(order_service, 'get_order_by_id', lambda order_id: read_before_payment)
        order_service.mark_delivered(order.id)

        stored = OrderModel.objects.get(id=order.id)
        assert stored.is_delivered is True
        assert stored.is_paid is True
        assert stored.payment_result['id'] == 'PAY-3'

    def test_totals(self, order_service, order, user, make_product, shipping_address):
        other = make_product(price='5.00')
        _place(order_service, user, [{'product': other.id, 'qty': 1}], shipping_address)

        assert order_service.count_orders() == 2
        # 30 + 10 + 4.50 and 5 + 10 + 0.75
        assert order_service.total_sales() == Decimal('60.25')

    def test_sales_by_date_counts_paid_orders_only(self, order_service, order, user, make_product, shipping_address):
        from django.utils import timezone
        unpaid_product = make_product(price='5.00')
        _place(order_service, user, [{'product': unpaid_product.id, 'qty': 1}], shipping_address)
        order_service.mark_paid(order.id, user, {'id': 'PAY-2', 'status': 'COMPLETED'})

        assert order_service.sales_by_date() == [
            {'date': timezone.now().date(), 'total_sales': Decimal('44.50')},
        ]
