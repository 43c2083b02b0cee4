"""
Orders module admin configuration.
"""
from django.contrib import admin

from .models import OrderModel, OrderItemModel


class OrderItemInline(admin.TabularInline):
    """Inline admin for order items."""
    model = OrderItemModel
    extra = 0
    readonly_fields = ('product', 'name', 'image', 'price', 'qty')


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = ('id', 'user', 'total_price', 'is_paid', 'paid_at', 'is_delivered', 'created_at')
    list_filter = ('is_paid', 'is_delivered', 'created_at')
    search_fields = ('user__email',)
    ordering = ('-created_at',)
    readonly_fields = ('items_price', 'shipping_price', 'tax_price', 'total_price', 'created_at', 'updated_at')
    inlines = [OrderItemInline]
