"""
Products module API views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.interfaces.pagination import StandardPagination
from .services import ProductService
from .serializers import (
    ProductSerializer,
    ProductCreateSerializer,
    ProductUpdateSerializer,
)
from .exceptions import ProductNotFoundError


product_service = ProductService()

ALL_PRODUCTS_LIMIT = 12
NEW_PRODUCTS_LIMIT = 5


@extend_schema(tags=['Products'])
class ProductListCreateView(APIView):
    """Product list and create endpoint."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='page', type=int, required=False),
            OpenApiParameter(name='page_size', type=int, required=False),
        ],
        responses={200: ProductSerializer(many=True)},
        summary="List products",
    )
    def get(self, request):
        paginator = StandardPagination()
        page = paginator.paginate_queryset(product_service.get_active_products(), request, view=self)
        serializer = ProductSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    @extend_schema(
        request=ProductCreateSerializer,
        responses={201: ProductSerializer},
        summary="Create a product",
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = product_service.create_product(**serializer.validated_data)

        output = ProductSerializer(product)
        return Response(output.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Products'])
class AllProductsView(APIView):
    """Latest products, unpaginated."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer(many=True)},
        summary="List latest products",
    )
    def get(self, request):
        products = product_service.get_latest_products(ALL_PRODUCTS_LIMIT)
        return Response(ProductSerializer(products, many=True).data)


@extend_schema(tags=['Products'])
class NewProductsView(APIView):
    """Newest arrivals."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductSerializer(many=True)},
        summary="List new products",
    )
    def get(self, request):
        products = product_service.get_latest_products(NEW_PRODUCTS_LIMIT)
        return Response(ProductSerializer(products, many=True).data)


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    """Product detail endpoint."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id: int):
        product = product_service.get_product_by_id(product_id)
        if not product:
            raise ProductNotFoundError(product_id)

        serializer = ProductSerializer(product)
        return Response(serializer.data)

    @extend_schema(
        request=ProductUpdateSerializer,
        responses={200: ProductSerializer},
        summary="Update a product",
    )
    def put(self, request, product_id: int):
        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = product_service.update_product(
            product_id=product_id,
            **serializer.validated_data
        )

        output = ProductSerializer(product)
        return Response(output.data)

    @extend_schema(summary="Delete a product")
    def delete(self, request, product_id: int):
        product_service.delete_product(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
