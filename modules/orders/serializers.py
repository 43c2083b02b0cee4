"""
Orders module serializers.
"""
from rest_framework import serializers

from modules.users.serializers import UserSummarySerializer
from .models import OrderModel, OrderItemModel


# Input

class OrderItemInputSerializer(serializers.Serializer):
    """Line item as submitted by the client. Only product and qty are trusted."""
    product = serializers.IntegerField()
    qty = serializers.IntegerField(min_value=1)
    name = serializers.CharField(required=False, allow_blank=True)
    image = serializers.CharField(required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)


class ShippingAddressSerializer(serializers.Serializer):
    """Serializer for shipping address."""
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100)
    postal_code = serializers.CharField(max_length=20)
    country = serializers.CharField(max_length=100)


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for checkout."""
    order_items = OrderItemInputSerializer(many=True, required=False, allow_empty=True)
    shipping_address = ShippingAddressSerializer()
    payment_method = serializers.CharField(max_length=50)


class PayerSerializer(serializers.Serializer):
    email_address = serializers.EmailField(required=False, allow_blank=True)


class PaymentResultSerializer(serializers.Serializer):
    """Payment confirmation sent by the payment provider callback."""
    id = serializers.CharField(max_length=100)
    status = serializers.CharField(max_length=50)
    update_time = serializers.CharField(max_length=50, required=False, allow_blank=True)
    payer = PayerSerializer(required=False)


# Output

class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for order item output."""

    class Meta:
        model = OrderItemModel
        fields = ['id', 'product', 'name', 'image', 'price', 'qty']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Serializer for order output."""
    order_items = OrderItemSerializer(source='items', many=True, read_only=True)

    class Meta:
        model = OrderModel
        fields = [
            'id',
            'user',
            'order_items',
            'shipping_address',
            'payment_method',
            'payment_result',
            'items_price',
            'shipping_price',
            'tax_price',
            'total_price',
            'is_paid',
            'paid_at',
            'is_delivered',
            'delivered_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class OrderWithUserSerializer(OrderSerializer):
    """Order output with its owner expanded."""
    user = UserSummarySerializer(read_only=True)


class OrderCountSerializer(serializers.Serializer):
    total_orders = serializers.IntegerField()


class TotalSalesSerializer(serializers.Serializer):
    total_sales = serializers.DecimalField(max_digits=14, decimal_places=2)


class DailySalesSerializer(serializers.Serializer):
    date = serializers.DateField()
    total_sales = serializers.DecimalField(max_digits=14, decimal_places=2)
