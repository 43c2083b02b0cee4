"""
Products module Django ORM models.
"""
from django.db import models


class ProductModel(models.Model):
    """Sellable product with its authoritative price and stock."""

    name = models.CharField(
        max_length=200,
        db_index=True,
        verbose_name='Name'
    )
    image = models.CharField(
        max_length=500,
        blank=True,
        default='',
        verbose_name='Image URL'
    )
    brand = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name='Brand'
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name='Description'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        verbose_name='Unit price'
    )
    count_in_stock = models.PositiveIntegerField(
        default=0,
        verbose_name='Units in stock'
    )
    category = models.ForeignKey(
        'categories.CategoryModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Category'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Soft delete marker'
    )

    class Meta:
        db_table = 'products'
        verbose_name = 'Product'
        verbose_name_plural = 'Products'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.id})"

    @property
    def is_deleted(self) -> bool:
        """Check if product is soft deleted."""
        return self.deleted_at is not None
