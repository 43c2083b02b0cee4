"""
Users module admin configuration.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count

from .models import UserModel


@admin.register(UserModel)
class UserAdmin(BaseUserAdmin):
    """Customer and administrator accounts."""
    list_display = ('email', 'username', 'is_staff', 'order_count', 'deleted_at', 'created_at')
    list_filter = ('is_staff', 'is_active')
    search_fields = ('email', 'username')
    ordering = ('-created_at',)

    fieldsets = (
        (None, {'fields': ('email', 'username', 'password')}),
        ('Access', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
        ('Dates', {'fields': ('last_login', 'created_at', 'updated_at', 'deleted_at')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'password1', 'password2'),
        }),
    )

    readonly_fields = ('created_at', 'updated_at', 'last_login')

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(order_count=Count('orders'))

    @admin.display(description='Orders', ordering='order_count')
    def order_count(self, obj):
        return obj.order_count
