"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from shared.interfaces.health_views import HealthCheckView, LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),

    path('health/', HealthCheckView.as_view(), name='health'),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),

    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    path('api/users/', include('modules.users.urls')),
    path('api/category/', include('modules.categories.urls')),
    path('api/products/', include('modules.products.urls')),
    path('api/orders/', include('modules.orders.urls')),
]
