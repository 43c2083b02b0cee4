"""
Orders module URLs.
"""
from django.urls import path

from .views import (
    OrderListCreateView,
    MyOrdersView,
    OrderCountView,
    TotalSalesView,
    SalesByDateView,
    OrderDetailView,
    OrderPayView,
    OrderDeliverView,
)

urlpatterns = [
    path('', OrderListCreateView.as_view(), name='order-list-create'),
    path('mine/', MyOrdersView.as_view(), name='order-mine'),
    path('total-orders/', OrderCountView.as_view(), name='order-count'),
    path('total-sales/', TotalSalesView.as_view(), name='order-total-sales'),
    path('total-sales-by-date/', SalesByDateView.as_view(), name='order-sales-by-date'),
    path('<int:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('<int:order_id>/pay/', OrderPayView.as_view(), name='order-pay'),
    path('<int:order_id>/deliver/', OrderDeliverView.as_view(), name='order-deliver'),
]
