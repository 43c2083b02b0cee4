"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.exceptions import DomainException


logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, DomainException):
        if exc.status_code >= 500:
            view = context.get('view')
            logger.error(
                f"{exc.code} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}",
                exc_info=exc,
            )

        body = {
            'error': exc.message,
            'code': exc.code,
        }
        body.update({key: value for key, value in exc.extra().items() if value is not None})
        return Response(body, status=exc.status_code)

    return response
