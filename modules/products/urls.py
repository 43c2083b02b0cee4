"""
Products module URLs.
"""
from django.urls import path

from .views import (
    ProductListCreateView,
    AllProductsView,
    NewProductsView,
    ProductDetailView,
)

urlpatterns = [
    path('', ProductListCreateView.as_view(), name='product-list'),
    path('allproducts/', AllProductsView.as_view(), name='product-all'),
    path('new/', NewProductsView.as_view(), name='product-new'),
    path('<int:product_id>/', ProductDetailView.as_view(), name='product-detail'),
]
