"""
Categories module exceptions.
"""
from shared.exceptions import BusinessRuleViolationError, EntityNotFoundError


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id):
        super().__init__("Category", category_id, code="CATEGORY_NOT_FOUND")


class CategoryAlreadyExistsError(BusinessRuleViolationError):
    """Raised when a category name is already taken."""

    def __init__(self, name: str):
        super().__init__(message=f"Category already exists: {name}", rule="unique_category_name")
        self.name = name
