"""DRF exception handler: the single place errors become HTTP responses.

- ``DomainException``  -> 400 with the message verbatim.
- ``APIException``     -> DRF's default mapping (401, 404, 405, parse errors).
- anything else        -> logged with traceback, generic 500, no details.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainException

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else None

    if isinstance(exc, DomainException):
        logger.info("domain_error", view=view_name, detail=exc.message)
        return Response(
            {"detail": exc.message},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        return response

    logger.exception(
        "unhandled_exception",
        view=view_name,
        error_type=type(exc).__name__,
    )
    return Response(
        {"detail": INTERNAL_ERROR_DETAIL},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
