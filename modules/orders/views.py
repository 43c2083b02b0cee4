"""
Orders module API views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import OrderService
from .serializers import (
    DailySalesSerializer,
    OrderCountSerializer,
    OrderCreateSerializer,
    OrderSerializer,
    OrderWithUserSerializer,
    PaymentResultSerializer,
    TotalSalesSerializer,
)


order_service = OrderService()


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Checkout (any user) and list of all orders (admin)."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [IsAdminUser()]
        return [IsAuthenticated()]

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
        summary="Place an order",
        description="Duplicate products are merged, prices come from the product records "
                    "and stock is taken in the same transaction as the order write.",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        order = order_service.place_order(
            user_id=request.user.id,
            order_items=data.get('order_items'),
            shipping_address=data['shipping_address'],
            payment_method=data['payment_method'],
        )

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: OrderWithUserSerializer(many=True)},
        summary="List all orders",
    )
    def get(self, request):
        orders = order_service.get_all_orders()
        return Response(OrderWithUserSerializer(orders, many=True).data)


@extend_schema(tags=['Orders'])
class MyOrdersView(APIView):
    """Orders of the current user."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="List my orders",
    )
    def get(self, request):
        orders = order_service.get_user_orders(request.user.id)
        return Response(OrderSerializer(orders, many=True).data)


@extend_schema(tags=['Orders'])
class OrderCountView(APIView):
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: OrderCountSerializer}, summary="Count orders")
    def get(self, request):
        return Response(OrderCountSerializer({'total_orders': order_service.count_orders()}).data)


@extend_schema(tags=['Orders'])
class TotalSalesView(APIView):
    permission_classes = [IsAdminUser]

    @extend_schema(responses={200: TotalSalesSerializer}, summary="Sum of all order totals")
    def get(self, request):
        return Response(TotalSalesSerializer({'total_sales': order_service.total_sales()}).data)


@extend_schema(tags=['Orders'])
class SalesByDateView(APIView):
    permission_classes = [IsAdminUser]

    @extend_schema(
        responses={200: DailySalesSerializer(many=True)},
        summary="Paid order totals per day",
    )
    def get(self, request):
        return Response(DailySalesSerializer(order_service.sales_by_date(), many=True).data)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderWithUserSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: int):
        order = order_service.get_order_for_user(order_id, request.user)
        return Response(OrderWithUserSerializer(order).data)


@extend_schema(tags=['Orders'])
class OrderPayView(APIView):
    """Payment confirmation endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=PaymentResultSerializer,
        responses={200: OrderSerializer},
        summary="Mark order as paid",
    )
    def put(self, request, order_id: int):
        serializer = PaymentResultSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = order_service.mark_paid(order_id, request.user, serializer.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Orders'])
class OrderDeliverView(APIView):
    """Delivery confirmation endpoint."""
    permission_classes = [IsAdminUser]

    @extend_schema(
        request=None,
        responses={200: OrderSerializer},
        summary="Mark order as delivered",
    )
    def put(self, request, order_id: int):
        order = order_service.mark_delivered(order_id)
        return Response(OrderSerializer(order).data)
