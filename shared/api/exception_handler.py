"""
REST framework exception handler

Translates the domain error taxonomy into HTTP responses. DRF's own
exceptions keep their default rendering; anything unexpected is logged and
answered with a generic 500 so internals never leak to clients.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):
    if isinstance(exc, ValidationError):
        return Response(
            {"error": str(exc), "errors": exc.errors},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, NotFoundError):
        return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, ConflictError):
        return Response({"error": str(exc)}, status=status.HTTP_409_CONFLICT)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=exc,
    )
    return Response(
        {"error": "Internal Server Error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
