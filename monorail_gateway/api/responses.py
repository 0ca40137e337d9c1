"""JSON envelopes shared by the HTTP routes."""

import logging
from typing import Any

from fastapi.responses import JSONResponse

from ..core.errors import MonorailError, ValidationError

_logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message, **extra})


def failure_response(exc: Exception, error: str) -> JSONResponse:
    """Map an operation failure to 400 (validation) or 500 (everything else)."""
    message = exc.message if isinstance(exc, MonorailError) else str(exc)

    if isinstance(exc, ValidationError):
        extra = {"field": exc.field} if exc.field else {}
        return error_response(400, error, message, **extra)

    _logger.warning(f"{error}: {message}")
    return error_response(500, error, message)
