"""
Domain exceptions.

Every exception carries a machine-readable ``code`` and the HTTP
``status_code`` the client should see. Views raise, they never set a
response status themselves; ``custom_exception_handler`` does the rendering.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    status_code = 400

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def extra(self) -> dict:
        """Additional fields rendered next to the error message."""
        return {}


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    status_code = 404

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} not found: {entity_id}",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = str(entity_id)

    def extra(self) -> dict:
        return {'entity': self.entity_name, 'entity_id': self.entity_id}


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field

    def extra(self) -> dict:
        return {'field': self.field}


class InvalidRequestError(ValidationError):
    """Raised when required input is missing or empty."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, field=field, code="INVALID_REQUEST")


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None):
        super().__init__(message=message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule

    def extra(self) -> dict:
        return {'rule': self.rule}


class InsufficientStockError(DomainException):
    """Raised when stock is insufficient."""

    def __init__(self, product_id: str, product_name: str, requested: int, available: int):
        super().__init__(
            message=f"Insufficient stock for {product_name}. Available: {available}",
            code="INSUFFICIENT_STOCK"
        )
        self.product_id = str(product_id)
        self.product_name = product_name
        self.requested = requested
        self.available = available

    def extra(self) -> dict:
        return {
            'product_id': self.product_id,
            'requested': self.requested,
            'available': self.available,
        }


class PersistenceError(DomainException):
    """Raised when the storage layer fails."""

    status_code = 500

    def __init__(self, message: str = "Failed to persist changes"):
        super().__init__(message=message, code="PERSISTENCE_ERROR")
