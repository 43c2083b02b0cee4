"""
Orders module exceptions.
"""
from shared.exceptions import EntityNotFoundError


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id):
        super().__init__("Order", order_id, code="ORDER_NOT_FOUND")
