"""DRF exception handler mapping rental errors to JSON responses."""

from __future__ import annotations

import logging

from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from .domain.exceptions import (
    ConflictError,
    InternalError,
    NotFoundError,
    RentalError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def flatten_drf_errors(detail, prefix: str = "") -> list[dict]:
    """Turn DRF's nested ``{field: [messages]}`` into ``[{field, message}]``."""
    issues: list[dict] = []
    if isinstance(detail, dict):
        for field, value in detail.items():
            name = f"{prefix}.{field}" if prefix else str(field)
            issues.extend(flatten_drf_errors(value, name))
    elif isinstance(detail, list):
        for value in detail:
            issues.extend(flatten_drf_errors(value, prefix))
    else:
        issues.append({"field": prefix or "non_field_errors", "message": str(detail)})
    return issues


def rental_exception_handler(exc, context):
    """Registered as ``REST_FRAMEWORK['EXCEPTION_HANDLER']``."""

    if isinstance(exc, ValidationError):
        return Response(
            {"error": exc.message, "details": exc.issues},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {"error": "Invalid request data", "details": flatten_drf_errors(exc.detail)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, ConflictError):
        return Response(
            {
                "error": exc.message,
                "conflictingDates": [d.isoformat() for d in exc.dates],
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, NotFoundError):
        return Response({"error": exc.message}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, (InternalError, RentalError)):
        logger.error(f"Rental request failed: {exc!r}", exc_info=exc)
        return Response(
            {"error": InternalError.default_message},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=exc,
    )
    return Response(
        {"error": InternalError.default_message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
