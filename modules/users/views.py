"""
Users module API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import UserService
from .serializers import (
    LoginResponseSerializer,
    LoginSerializer,
    LogoutSerializer,
    ProfileUpdateSerializer,
    UserAdminUpdateSerializer,
    UserCreateSerializer,
    UserSerializer,
)
from .exceptions import UserNotFoundError


user_service = UserService()


@extend_schema(tags=['Users'])
class UserListCreateView(APIView):
    """Registration (public) and user list (admin)."""

    def get_permissions(self):
        if self.request.method == 'POST':
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        request=UserCreateSerializer,
        responses={201: UserSerializer},
        summary="Register a new user",
    )
    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        user = user_service.register_user(
            username=data.get('username'),
            email=data.get('email'),
            password=data.get('password'),
        )

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: UserSerializer(many=True)},
        summary="List all users",
    )
    def get(self, request):
        users = user_service.get_all_users()
        return Response(UserSerializer(users, many=True).data)


@extend_schema(tags=['Auth'])
class LoginView(APIView):
    """Exchange credentials for a JWT pair."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=LoginSerializer,
        responses={200: LoginResponseSerializer},
        summary="Log in",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = user_service.authenticate(**serializer.validated_data)
        return Response(LoginResponseSerializer(result).data)


@extend_schema(tags=['Auth'])
class LogoutView(APIView):
    """Revoke a refresh token."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        request=LogoutSerializer,
        responses={200: {'type': 'object', 'properties': {'message': {'type': 'string'}}}},
        summary="Log out",
    )
    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user_service.logout(serializer.validated_data['refresh_token'])
        return Response({'message': 'Logged out successfully'})


@extend_schema(tags=['Users'])
class UserProfileView(APIView):
    """Current user endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: UserSerializer},
        summary="Get current user profile",
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data)

    @extend_schema(
        request=ProfileUpdateSerializer,
        responses={200: UserSerializer},
        summary="Update current user profile",
    )
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.update_profile(
            user_id=request.user.id,
            **serializer.validated_data
        )

        return Response(UserSerializer(user).data)


@extend_schema(tags=['Users'])
class UserDetailView(APIView):
    """Admin view of a single user."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        responses={200: UserSerializer},
        summary="Get user by ID",
    )
    def get(self, request, user_id: int):
        user = user_service.get_user_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return Response(UserSerializer(user).data)

    @extend_schema(
        request=UserAdminUpdateSerializer,
        responses={200: UserSerializer},
        summary="Update user by ID",
    )
    def put(self, request, user_id: int):
        serializer = UserAdminUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = user_service.update_user(user_id=user_id, **serializer.validated_data)
        return Response(UserSerializer(user).data)

    @extend_schema(summary="Delete user by ID")
    def delete(self, request, user_id: int):
        user_service.delete_user(user_id)
        return Response({'message': 'User removed'})
