"""
Products module service layer.
"""
import logging
from typing import Optional, List, Iterable

from django.db.models import F
from django.utils import timezone

from modules.categories.exceptions import CategoryNotFoundError
from modules.categories.services import CategoryService
from .models import ProductModel
from .exceptions import ProductNotFoundError


logger = logging.getLogger(__name__)

category_service = CategoryService()

EDITABLE_FIELDS = (
    'name',
    'price',
    'count_in_stock',
    'image',
    'brand',
    'description',
    'category_id',
)


class ProductService:
    """
    Product business logic service.
    """

    def get_product_by_id(self, product_id: int) -> Optional[ProductModel]:
        """Get product by ID."""
        try:
            return ProductModel.objects.select_related('category').get(
                id=product_id,
                deleted_at__isnull=True
            )
        except ProductModel.DoesNotExist:
            return None

    def get_products_by_ids(self, product_ids: Iterable[int]) -> List[ProductModel]:
        """Get multiple products by IDs in a single query."""
        return list(ProductModel.objects.filter(id__in=list(product_ids), deleted_at__isnull=True))

    def get_active_products(self):
        """Queryset of active products, newest first."""
        return (
            ProductModel.objects.filter(deleted_at__isnull=True)
            .select_related('category')
            .order_by('-created_at')
        )

    def get_latest_products(self, limit: int) -> List[ProductModel]:
        """Get the most recently added products."""
        return list(self.get_active_products()[:limit])

    def create_product(
        self,
        name: str,
        price,
        count_in_stock: int = 0,
        image: str = '',
        brand: str = '',
        description: str = '',
        category_id: int = None,
    ) -> ProductModel:
        """Create a new product."""
        self._ensure_category(category_id)
        product = ProductModel.objects.create(
            name=name,
            price=price,
            count_in_stock=count_in_stock,
            image=image,
            brand=brand,
            description=description,
            category_id=category_id,
        )
        logger.info(f"Created product: {product.name} ({product.id})")
        return product

    def update_product(
        self,
        product_id: int,
        **kwargs
    ) -> ProductModel:
        """
        Update the given product fields. Passing ``category_id=None`` clears
        the category.
        """
        product = self.get_product_by_id(product_id)
        if not product:
            raise ProductNotFoundError(product_id)

        changed = [key for key in kwargs if key in EDITABLE_FIELDS]
        if 'category_id' in changed:
            self._ensure_category(kwargs['category_id'])

        for key in changed:
            setattr(product, key, kwargs[key])

        # Stock moves under concurrent checkouts; only write what was sent.
        product.save(update_fields=[*changed, 'updated_at'])
        return product

    def delete_product(self, product_id: int) -> ProductModel:
        """Soft delete a product."""
        product = self.get_product_by_id(product_id)
        if not product:
            raise ProductNotFoundError(product_id)

        product.deleted_at = timezone.now()
        product.save(update_fields=['deleted_at', 'updated_at'])
        logger.info(f"Deleted product: {product_id}")
        return product

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """
        Atomically take ``quantity`` units out of stock.

        The update only matches while enough units remain, so two writers
        can never push ``count_in_stock`` below zero.

        Returns:
            True when the row was updated, False when stock was insufficient
            or the product no longer exists.
        """
        updated = ProductModel.objects.filter(
            id=product_id,
            deleted_at__isnull=True,
            count_in_stock__gte=quantity,
        ).update(count_in_stock=F('count_in_stock') - quantity)
        return updated == 1

    def _ensure_category(self, category_id: Optional[int]) -> None:
        if category_id is None:
            return
        if not category_service.get_category_by_id(category_id):
            raise CategoryNotFoundError(category_id)
