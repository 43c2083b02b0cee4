"""
Orders module Django ORM models.
"""
from django.db import models


class OrderModel(models.Model):
    """Customer order with the prices computed at checkout."""

    user = models.ForeignKey(
        'users.UserModel',
        on_delete=models.CASCADE,
        related_name='orders',
        verbose_name='Owner'
    )
    shipping_address = models.JSONField(
        default=dict,
        verbose_name='Shipping address',
        help_text='address, city, postal_code, country'
    )
    payment_method = models.CharField(
        max_length=50,
        verbose_name='Payment method'
    )
    payment_result = models.JSONField(
        default=dict,
        blank=True,
        verbose_name='Payment result',
        help_text='id, status, update_time, email_address'
    )
    items_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        verbose_name='Items price'
    )
    shipping_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        verbose_name='Shipping price'
    )
    tax_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        verbose_name='Tax price'
    )
    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        verbose_name='Total price'
    )
    is_paid = models.BooleanField(
        default=False,
        verbose_name='Paid'
    )
    paid_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Paid at'
    )
    is_delivered = models.BooleanField(
        default=False,
        verbose_name='Delivered'
    )
    delivered_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Delivered at'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    class Meta:
        db_table = 'orders'
        verbose_name = 'Order'
        verbose_name_plural = 'Orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'created_at'], name='orders_user_created_idx'),
            models.Index(fields=['is_paid', 'paid_at'], name='orders_paid_idx'),
        ]

    def __str__(self):
        return f"Order {self.id} by user {self.user_id}"


class OrderItemModel(models.Model):
    """Line item snapshotted from the product at checkout."""

    order = models.ForeignKey(
        OrderModel,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='Order'
    )
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.PROTECT,
        related_name='order_items',
        verbose_name='Product'
    )
    name = models.CharField(
        max_length=200,
        verbose_name='Product name'
    )
    image = models.CharField(
        max_length=500,
        blank=True,
        default='',
        verbose_name='Image URL'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        verbose_name='Unit price'
    )
    qty = models.PositiveIntegerField(
        verbose_name='Quantity'
    )

    class Meta:
        db_table = 'order_items'
        verbose_name = 'Order Item'
        verbose_name_plural = 'Order Items'
        ordering = ['id']

    def __str__(self):
        return f"Order {self.order_id} - Product {self.product_id} x {self.qty}"
