"""
Products module exceptions.
"""
from shared.exceptions import EntityNotFoundError, InsufficientStockError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id):
        super().__init__("Product", product_id, code="PRODUCT_NOT_FOUND")
        self.product_id = str(product_id)


# Re-export for convenience
__all__ = [
    'ProductNotFoundError',
    'InsufficientStockError',
]
