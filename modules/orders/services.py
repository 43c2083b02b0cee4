"""
Orders module service layer.

Order placement runs four steps in order:

1. ``normalize_order_items``: merge duplicate products, summing quantities.
2. ``validate_stock``: check every product exists and has enough stock, and
   replace client-sent name/image/price with the product record's values.
3. ``calculate_prices``: items, shipping, tax and total.
4. ``OrderService.place_order``: write the order and take the stock in a
   single transaction.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from shared.exceptions import InsufficientStockError, InvalidRequestError, PersistenceError
from modules.products.exceptions import ProductNotFoundError
from modules.products.services import ProductService
from .models import OrderModel, OrderItemModel
from .exceptions import OrderNotFoundError


logger = logging.getLogger(__name__)

product_service = ProductService()

CENT = Decimal('0.01')


def _to_money(value) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrderPrices:
    """Monetary summary of an order, every amount quantized to cents."""
    items_price: Decimal
    shipping_price: Decimal
    tax_price: Decimal
    total_price: Decimal


def normalize_order_items(order_items: Optional[Iterable[dict]]) -> List[dict]:
    """
    Merge line items that reference the same product.

    The first occurrence of a product keeps its other fields and its
    position; later duplicates only add their ``qty``.

    Raises:
        InvalidRequestError: If no items were given
    """
    if not order_items:
        raise InvalidRequestError("No order items provided.", field="order_items")

    merged = {}
    for item in order_items:
        product_id = item['product']
        if product_id in merged:
            merged[product_id]['qty'] += item['qty']
        else:
            merged[product_id] = dict(item)

    return list(merged.values())


def validate_stock(items: List[dict]) -> List[dict]:
    """
    Check normalized items against the product records.

    Products are fetched in one query. Returned items carry the product's
    own name, image and price.

    Raises:
        ProductNotFoundError: If a referenced product does not exist
        InsufficientStockError: If a quantity exceeds the product's stock
    """
    products = {
        product.id: product
        for product in product_service.get_products_by_ids(item['product'] for item in items)
    }

    enriched = []
    for item in items:
        product = products.get(item['product'])
        if product is None:
            raise ProductNotFoundError(item['product'])

        if product.count_in_stock < item['qty']:
            raise InsufficientStockError(
                product_id=product.id,
                product_name=product.name,
                requested=item['qty'],
                available=product.count_in_stock,
            )

        enriched.append({
            **item,
            'name': product.name,
            'image': product.image,
            'price': product.price,
        })

    return enriched


def calculate_prices(items: Iterable[dict]) -> OrderPrices:
    """Price an order from enriched items using the configured pricing policy."""
    policy = settings.ORDER_PRICING

    items_price = _to_money(sum((Decimal(item['price']) * item['qty'] for item in items), Decimal('0')))
    if items_price > policy['FREE_SHIPPING_THRESHOLD']:
        shipping_price = _to_money(0)
    else:
        shipping_price = _to_money(policy['SHIPPING_FEE'])
    tax_price = _to_money(items_price * policy['TAX_RATE'])
    total_price = _to_money(items_price + shipping_price + tax_price)

    return OrderPrices(
        items_price=items_price,
        shipping_price=shipping_price,
        tax_price=tax_price,
        total_price=total_price,
    )


class OrderService:
    """
    Order business logic service.
    """

    def place_order(
        self,
        user_id: int,
        order_items: Optional[List[dict]],
        shipping_address: dict,
        payment_method: str,
    ) -> OrderModel:
        """
        Create an order for ``user_id`` and take its items out of stock.

        Raises:
            InvalidRequestError: If no items were given
            ProductNotFoundError: If an item references an unknown product
            InsufficientStockError: If stock runs short, either at validation
                or when the decrement is applied
            PersistenceError: If the database rejects the write
        """
        items = validate_stock(normalize_order_items(order_items))
        prices = calculate_prices(items)

        order = self._persist_order(user_id, items, shipping_address, payment_method, prices)
        logger.info(
            f"Placed order {order.id} for user {user_id}: "
            f"{len(items)} item(s), total {prices.total_price}"
        )
        return order

    def _persist_order(
        self,
        user_id: int,
        items: List[dict],
        shipping_address: dict,
        payment_method: str,
        prices: OrderPrices,
    ) -> OrderModel:
        try:
            with transaction.atomic():
                order = OrderModel.objects.create(
                    user_id=user_id,
                    shipping_address=shipping_address,
                    payment_method=payment_method,
                    items_price=prices.items_price,
                    shipping_price=prices.shipping_price,
                    tax_price=prices.tax_price,
                    total_price=prices.total_price,
                )
                OrderItemModel.objects.bulk_create([
                    OrderItemModel(
                        order=order,
                        product_id=item['product'],
                        name=item['name'],
                        image=item['image'],
                        price=item['price'],
                        qty=item['qty'],
                    )
                    for item in items
                ])

                for item in items:
                    if not product_service.decrement_stock(item['product'], item['qty']):
                        self._raise_stock_conflict(item)
        except DatabaseError as e:
            logger.error(f"Failed to persist order for user {user_id}: {e}", exc_info=True)
            raise PersistenceError("Failed to save order") from e

        return order

    def _raise_stock_conflict(self, item: dict) -> None:
        # Another checkout took the stock after validation passed.
        product = product_service.get_product_by_id(item['product'])
        if product is None:
            raise ProductNotFoundError(item['product'])

        logger.warning(
            f"Stock for product {product.id} changed during checkout: "
            f"requested {item['qty']}, available {product.count_in_stock}"
        )
        raise InsufficientStockError(
            product_id=product.id,
            product_name=product.name,
            requested=item['qty'],
            available=product.count_in_stock,
        )

    def get_order_by_id(self, order_id: int) -> OrderModel:
        """Get order by ID."""
        try:
            return (
                OrderModel.objects.select_related('user')
                .prefetch_related('items')
                .get(id=order_id)
            )
        except OrderModel.DoesNotExist:
            raise OrderNotFoundError(order_id)

    def get_order_for_user(self, order_id: int, user) -> OrderModel:
        """Get an order visible to ``user``: their own, or any for admins."""
        order = self.get_order_by_id(order_id)
        if not user.is_staff and order.user_id != user.id:
            raise OrderNotFoundError(order_id)
        return order

    def get_user_orders(self, user_id: int) -> List[OrderModel]:
        """Get all orders for a user."""
        return list(
            OrderModel.objects.filter(user_id=user_id)
            .prefetch_related('items')
            .order_by('-created_at')
        )

    def get_all_orders(self) -> List[OrderModel]:
        """Get every order with its owner."""
        return list(
            OrderModel.objects.select_related('user')
            .prefetch_related('items')
            .order_by('-created_at')
        )

    def count_orders(self) -> int:
        return OrderModel.objects.count()

    def total_sales(self) -> Decimal:
        """Sum of total_price over every order."""
        total = OrderModel.objects.aggregate(total=Sum('total_price'))['total']
        return _to_money(total or 0)

    def sales_by_date(self) -> List[dict]:
        """Sum of total_price over paid orders, grouped by day of payment."""
        rows = (
            OrderModel.objects.filter(is_paid=True, paid_at__isnull=False)
            .annotate(date=TruncDate('paid_at'))
            .values('date')
            .annotate(total_sales=Sum('total_price'))
            .order_by('date')
        )
        return [
            {'date': row['date'], 'total_sales': _to_money(row['total_sales'])}
            for row in rows
        ]

    def mark_paid(self, order_id: int, user, payment: dict) -> OrderModel:
        """Record a payment confirmation on the order."""
        order = self.get_order_for_user(order_id, user)

        order.is_paid = True
        order.paid_at = timezone.now()
        order.payment_result = {
            'id': payment.get('id'),
            'status': payment.get('status'),
            'update_time': payment.get('update_time'),
            'email_address': (payment.get('payer') or {}).get('email_address'),
        }
        self._save(order, ['is_paid', 'paid_at', 'payment_result'])

        logger.info(f"Order {order.id} marked paid")
        return order

    def mark_delivered(self, order_id: int) -> OrderModel:
        """Flag the order delivered. Re-marking refreshes delivered_at."""
        order = self.get_order_by_id(order_id)

        order.is_delivered = True
        order.delivered_at = timezone.now()
        self._save(order, ['is_delivered', 'delivered_at'])

        logger.info(f"Order {order.id} marked delivered")
        return order

    def _save(self, order: OrderModel, fields: List[str]) -> None:
        # Paid and delivered flags are set by different callers.
        try:
            order.save(update_fields=[*fields, 'updated_at'])
        except DatabaseError as e:
            logger.error(f"Failed to update order {order.id}: {e}", exc_info=True)
            raise PersistenceError("Failed to update order") from e
