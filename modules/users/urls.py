"""
Users module URLs.
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    UserListCreateView,
    LoginView,
    LogoutView,
    UserProfileView,
    UserDetailView,
)

urlpatterns = [
    # Auth
    path('auth/', LoginView.as_view(), name='user-login'),
    path('logout/', LogoutView.as_view(), name='user-logout'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    # User
    path('profile/', UserProfileView.as_view(), name='user-profile'),
    path('', UserListCreateView.as_view(), name='user-list'),
    path('<int:user_id>/', UserDetailView.as_view(), name='user-detail'),
]
