"""
Health check views.
"""
import logging

from django.core.cache import cache
from django.db import DatabaseError, connection
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


logger = logging.getLogger(__name__)


@extend_schema(tags=['Health'])
class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'healthy', 'service': 'storefront'}, status=status.HTTP_200_OK)


@extend_schema(tags=['Health'])
class ReadinessCheckView(APIView):
    """Readiness probe - checks the database and the cache."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        checks = {
            'database': self._check_database(),
            'cache': self._check_cache(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        if not all_healthy:
            logger.warning(f"Readiness check failed: {checks}")

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except DatabaseError as e:
            return {'healthy': False, 'error': str(e)}

    def _check_cache(self):
        # Redis connection errors surface as assorted exception types.
        try:
            cache.set('readiness_probe', 'ok', 10)
            return {'healthy': cache.get('readiness_probe') == 'ok'}
        except Exception as e:
            return {'healthy': False, 'error': str(e)}


@extend_schema(tags=['Health'])
class LivenessCheckView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)
