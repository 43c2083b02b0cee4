"""
Categories module serializers.
"""
from rest_framework import serializers

from .models import CategoryModel


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for category output."""

    class Meta:
        model = CategoryModel
        fields = ['id', 'name', 'created_at', 'updated_at']
        read_only_fields = fields


class CategoryWriteSerializer(serializers.Serializer):
    """Serializer for category create/update."""

    name = serializers.CharField(max_length=32, required=False, allow_blank=True)
