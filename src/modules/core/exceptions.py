"""Project-wide DRF exception handler.

Anything a view does not translate itself ends up here.  Framework
exceptions (malformed JSON, unsupported method, ...) keep the status code
DRF assigns them; everything else is an infrastructure fault and becomes
a 500.  Both share one body shape::

    {"timestamp": "17-10-2026 02:15:09", "status": 500, "message": "..."}
"""

from __future__ import annotations

from typing import Any, Dict

import structlog
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

TIMESTAMP_FORMAT = "%d-%m-%Y %I:%M:%S"


def error_body(status_code: int, message: str) -> Dict[str, Any]:
    return {
        "timestamp": timezone.localtime().strftime(TIMESTAMP_FORMAT),
        "status": status_code,
        "message": message,
    }


def _message_from(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(data)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if response is not None:
        logger.warning(
            "api.request_failed",
            view=view_name,
            status_code=response.status_code,
            error=type(exc).__name__,
        )
        response.data = error_body(response.status_code, _message_from(response.data))
        return response

    logger.exception("api.unhandled_error", view=view_name, error=type(exc).__name__)
    return Response(
        error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error."),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
