"""
Users module serializers.
"""
from rest_framework import serializers

from .models import UserModel


class UserSerializer(serializers.ModelSerializer):
    """Serializer for user output."""

    is_admin = serializers.BooleanField(read_only=True)

    class Meta:
        model = UserModel
        fields = [
            'id',
            'username',
            'email',
            'is_admin',
            'created_at',
        ]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Owner reference embedded in order listings."""

    class Meta:
        model = UserModel
        fields = ['id', 'username', 'email']
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    """Serializer for user registration."""

    username = serializers.CharField(max_length=50, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True)


class LoginSerializer(serializers.Serializer):
    """Serializer for login request."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class LoginResponseSerializer(serializers.Serializer):
    """Serializer for login response."""

    access_token = serializers.CharField(read_only=True)
    refresh_token = serializers.CharField(read_only=True)
    token_type = serializers.CharField(read_only=True, default="Bearer")
    user = UserSerializer(read_only=True)


class LogoutSerializer(serializers.Serializer):
    """Serializer for logout request."""

    refresh_token = serializers.CharField()


class ProfileUpdateSerializer(serializers.Serializer):
    """Serializer for the caller's own profile update."""

    username = serializers.CharField(max_length=50, required=False)
    email = serializers.EmailField(required=False)
    password = serializers.CharField(min_length=6, write_only=True, required=False)


class UserAdminUpdateSerializer(serializers.Serializer):
    """Serializer for admin user update."""

    username = serializers.CharField(max_length=50, required=False)
    email = serializers.EmailField(required=False)
    is_admin = serializers.BooleanField(required=False)
