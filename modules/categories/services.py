"""
Categories business logic services.
"""
import logging
from typing import List, Optional

from django.db import transaction
from django.utils import timezone

from shared.exceptions import InvalidRequestError
from .models import CategoryModel
from .exceptions import (
    CategoryNotFoundError,
    CategoryAlreadyExistsError,
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for category operations."""

    def get_category_by_id(self, category_id: int) -> Optional[CategoryModel]:
        """Get category by ID."""
        try:
            return CategoryModel.objects.get(id=category_id, deleted_at__isnull=True)
        except CategoryModel.DoesNotExist:
            return None

    def get_all_categories(self) -> List[CategoryModel]:
        """Get all active categories."""
        return list(
            CategoryModel.objects.filter(deleted_at__isnull=True)
            .order_by('name')
        )

    @transaction.atomic
    def create_category(self, name: str) -> CategoryModel:
        """Create a new category."""
        name = (name or '').strip()
        if not name:
            raise InvalidRequestError("Name is required", field="name")

        self._ensure_unique(name)
        category = CategoryModel.objects.create(name=name)

        logger.info(f"Created category: {category.name} ({category.id})")
        return category

    @transaction.atomic
    def update_category(self, category_id: int, name: str) -> CategoryModel:
        """Rename a category."""
        category = self.get_category_by_id(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)

        name = (name or '').strip()
        if not name:
            raise InvalidRequestError("Name is required", field="name")

        self._ensure_unique(name, exclude_id=category.id)
        category.name = name
        category.save()

        logger.info(f"Updated category: {category.name} ({category.id})")
        return category

    @transaction.atomic
    def delete_category(self, category_id: int) -> CategoryModel:
        """Soft delete a category."""
        category = self.get_category_by_id(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)

        category.deleted_at = timezone.now()
        category.save()
        logger.info(f"Deleted category: {category_id}")
        return category

    def _ensure_unique(self, name: str, exclude_id: int = None) -> None:
        queryset = CategoryModel.objects.filter(name__iexact=name, deleted_at__isnull=True)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        if queryset.exists():
            raise CategoryAlreadyExistsError(name=name)
