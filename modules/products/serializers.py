"""
Products module serializers.
"""
from decimal import Decimal

from rest_framework import serializers

from .models import ProductModel


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for product output."""
    category_name = serializers.CharField(source='category.name', read_only=True, allow_null=True)

    class Meta:
        model = ProductModel
        fields = [
            'id',
            'name',
            'image',
            'brand',
            'description',
            'price',
            'count_in_stock',
            'category',
            'category_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    """Serializer for product creation."""

    name = serializers.CharField(max_length=200)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))
    count_in_stock = serializers.IntegerField(min_value=0, default=0)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    brand = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')
    category_id = serializers.IntegerField(required=False, allow_null=True)


class ProductUpdateSerializer(serializers.Serializer):
    """Serializer for product update."""

    name = serializers.CharField(max_length=200, required=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'), required=False)
    count_in_stock = serializers.IntegerField(min_value=0, required=False)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True)
    brand = serializers.CharField(max_length=100, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    category_id = serializers.IntegerField(required=False, allow_null=True)
