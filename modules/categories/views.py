"""
Categories module API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import CategoryService
from .serializers import CategorySerializer, CategoryWriteSerializer
from .exceptions import CategoryNotFoundError


category_service = CategoryService()


@extend_schema(tags=['Categories'])
class CategoryCreateView(APIView):
    """Category create endpoint."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=CategoryWriteSerializer,
        responses={201: CategorySerializer},
        summary="Create a category",
    )
    def post(self, request):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = category_service.create_category(serializer.validated_data.get('name'))
        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Categories'])
class CategoryListView(APIView):
    """Category list endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CategorySerializer(many=True)},
        summary="List categories",
    )
    def get(self, request):
        categories = category_service.get_all_categories()
        return Response(CategorySerializer(categories, many=True).data)


@extend_schema(tags=['Categories'])
class CategoryDetailView(APIView):
    """Category read, update and delete endpoint."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Get a category",
    )
    def get(self, request, category_id: int):
        category = category_service.get_category_by_id(category_id)
        if not category:
            raise CategoryNotFoundError(category_id)
        return Response(CategorySerializer(category).data)

    @extend_schema(
        request=CategoryWriteSerializer,
        responses={200: CategorySerializer},
        summary="Update a category",
    )
    def put(self, request, category_id: int):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = category_service.update_category(
            category_id=category_id,
            name=serializer.validated_data.get('name'),
        )
        return Response(CategorySerializer(category).data)

    @extend_schema(
        responses={200: CategorySerializer},
        summary="Delete a category",
    )
    def delete(self, request, category_id: int):
        category = category_service.delete_category(category_id)
        return Response(CategorySerializer(category).data)
