"""
Categories URL configuration.
"""
from django.urls import path

from .views import (
    CategoryCreateView,
    CategoryListView,
    CategoryDetailView,
)

app_name = 'categories'

urlpatterns = [
    path('', CategoryCreateView.as_view(), name='category-create'),
    path('categories/', CategoryListView.as_view(), name='category-list'),
    path('<int:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
]
