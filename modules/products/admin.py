"""
Products module admin configuration.
"""
from django.contrib import admin

from .models import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('id', 'name', 'brand', 'price', 'count_in_stock', 'category', 'created_at')
    list_filter = ('category', 'created_at')
    search_fields = ('name', 'brand')
    ordering = ('-created_at',)
    readonly_fields = ('created_at', 'updated_at')
