"""
Users module service layer.
"""
import logging
from typing import Optional, List

from django.utils import timezone
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from shared.exceptions import InvalidRequestError
from .models import UserModel
from .exceptions import (
    AdminDeletionError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    UserAlreadyExistsError,
    UserInactiveError,
    UserNotFoundError,
)


logger = logging.getLogger(__name__)


class UserService:
    """
    User business logic service.
    """

    def get_user_by_id(self, user_id: int) -> Optional[UserModel]:
        """Get user by ID."""
        try:
            return UserModel.objects.get(id=user_id, deleted_at__isnull=True)
        except UserModel.DoesNotExist:
            return None

    def get_user_by_email(self, email: str) -> Optional[UserModel]:
        """Get user by email."""
        try:
            return UserModel.objects.get(email__iexact=email, deleted_at__isnull=True)
        except UserModel.DoesNotExist:
            return None

    def register_user(self, username: str, email: str, password: str) -> UserModel:
        """Register a new user."""
        if not username or not email or not password:
            raise InvalidRequestError("Please fill all fields")

        if UserModel.objects.filter(email__iexact=email).exists():
            raise UserAlreadyExistsError(field="email", value=email)

        user = UserModel.objects.create_user(
            email=email,
            username=username,
            password=password,
        )
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> dict:
        """Authenticate user and return tokens."""
        user = self.get_user_by_email(email)

        if not user or not user.check_password(password):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise UserInactiveError()

        refresh = RefreshToken.for_user(user)

        return {
            'access_token': str(refresh.access_token),
            'refresh_token': str(refresh),
            'token_type': 'Bearer',
            'user': user,
        }

    def logout(self, refresh_token: str) -> None:
        """Blacklist a refresh token so it can no longer mint access tokens."""
        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError:
            raise InvalidRefreshTokenError()

    def update_profile(
        self,
        user_id: int,
        username: str = None,
        email: str = None,
        password: str = None,
    ) -> UserModel:
        """Update the caller's own profile."""
        user = self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        self._apply_identity(user, username=username, email=email)
        if password:
            user.set_password(password)

        user.save()
        return user

    def update_user(
        self,
        user_id: int,
        username: str = None,
        email: str = None,
        is_admin: bool = None,
    ) -> UserModel:
        """Update any user (admin only)."""
        user = self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        self._apply_identity(user, username=username, email=email)
        if is_admin is not None:
            user.is_staff = is_admin

        user.save()
        return user

    def get_all_users(
        self,
        offset: int = 0,
        limit: int = 100,
    ) -> List[UserModel]:
        """Get all active users."""
        queryset = UserModel.objects.filter(deleted_at__isnull=True)
        return list(queryset.order_by('-created_at')[offset:offset + limit])

    def delete_user(self, user_id: int) -> None:
        """Soft delete a user. Administrators cannot be deleted."""
        user = self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        if user.is_admin:
            raise AdminDeletionError()

        user.deleted_at = timezone.now()
        user.is_active = False
        user.save()
        logger.info(f"Deleted user {user_id}")

    def _apply_identity(self, user: UserModel, username: str = None, email: str = None) -> None:
        if username:
            user.username = username
        if email and email.lower() != user.email.lower():
            if UserModel.objects.filter(email__iexact=email).exclude(id=user.id).exists():
                raise UserAlreadyExistsError(field="email", value=email)
            user.email = email
