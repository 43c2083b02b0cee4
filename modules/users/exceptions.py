"""
Users module exceptions.
"""
from shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
)


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user is not found."""

    def __init__(self, identifier: str):
        super().__init__("User", identifier, code="USER_NOT_FOUND")


class UserAlreadyExistsError(BusinessRuleViolationError):
    """Raised when registering with an email that is already taken."""

    def __init__(self, field: str, value: str):
        super().__init__(message="User already exists", rule=f"unique_{field}")
        self.field = field
        self.value = value


class InvalidCredentialsError(DomainException):
    """Raised when email or password do not match."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message, code="INVALID_CREDENTIALS")


class UserInactiveError(DomainException):
    """Raised when a deactivated account tries to log in."""

    def __init__(self):
        super().__init__(message="Account is deactivated", code="USER_INACTIVE")


class AdminDeletionError(BusinessRuleViolationError):
    """Raised when trying to delete an administrator."""

    def __init__(self):
        super().__init__(message="Cannot delete admin user", rule="admin_protected")


class InvalidRefreshTokenError(DomainException):
    """Raised when the refresh token given at logout cannot be blacklisted."""

    def __init__(self):
        super().__init__(message="Invalid or expired refresh token", code="INVALID_TOKEN")
