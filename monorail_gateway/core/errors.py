"""
Error Taxonomy

Domain error kinds raised by the Monorail clients, and the classifier that
turns lower-level failures (httpx transport errors, non-2xx responses,
anything else) into exactly one of them.

Quote and swap failures wrap the classified inner error instead of flattening
it into a string, so callers can match on the outer kind (which subsystem
failed) or walk ``cause`` to the root failure.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

import httpx


class ErrorKind(str, Enum):
    """Kinds of domain errors surfaced to callers."""

    API = "api_error"
    TOKEN_NOT_FOUND = "token_not_found"
    VALIDATION = "validation_error"
    QUOTE = "quote_error"
    SWAP_EXECUTION = "swap_execution_error"


class MonorailError(Exception):
    """Base class for every domain error."""

    kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    @property
    def root_cause(self) -> BaseException:
        """Innermost error in the ``cause`` chain (``self`` if unwrapped)."""
        current: BaseException = self
        while isinstance(current, MonorailError) and current.cause is not None:
            current = current.cause
        return current

    def to_dict(self) -> Dict[str, Any]:
        cause: Any = None
        if isinstance(self.cause, MonorailError):
            cause = self.cause.to_dict()
        elif self.cause is not None:
            cause = str(self.cause)
        return {
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "cause": cause,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, status_code={self.status_code!r})"


class ApiError(MonorailError):
    """Classified remote or transport failure."""

    kind = ErrorKind.API


class TokenNotFoundError(MonorailError):
    """Token resolution exhausted every lookup without a match."""

    kind = ErrorKind.TOKEN_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__(f"Token not found: {identifier}")
        self.identifier = identifier


class ValidationError(MonorailError):
    """Bad caller input. Raised before any network call."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code)
        self.field = field


class QuoteError(MonorailError):
    """Failure while requesting a quote."""

    kind = ErrorKind.QUOTE

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"Quote API Error: {message}", cause=cause)


class SwapExecutionError(MonorailError):
    """Failure in either phase of swap execution."""

    kind = ErrorKind.SWAP_EXECUTION

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"Swap Execution Error: {message}", cause=cause)


class InvalidArgumentsError(Exception):
    """Argument bundle did not match the declared shape of an operation.

    Not a MonorailError: shape failures are rejected by the dispatcher before
    any domain validation runs.
    """

    def __init__(self, tool: str, detail: str):
        super().__init__(f"Invalid arguments for {tool}: {detail}")
        self.tool = tool
        self.detail = detail


def _upstream_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def classify_error(exc: BaseException) -> MonorailError:
    """Map any caught failure to exactly one domain error."""
    if isinstance(exc, MonorailError):
        return exc

    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status == 404:
            return ApiError("Resource not found", status_code=404, cause=exc)
        if status == 400:
            return ValidationError(_upstream_message(exc.response) or "Bad request", status_code=400)
        if status >= 500:
            return ApiError("Server error occurred", status_code=status, cause=exc)
        return ApiError(
            _upstream_message(exc.response) or str(exc) or "Unknown error occurred",
            status_code=status,
            cause=exc,
        )

    # httpx raises ConnectError for both refused connections and DNS failures
    if isinstance(exc, httpx.ConnectError):
        return ApiError("Network connection failed", cause=exc)

    return ApiError(str(exc) or "Unknown error occurred", cause=exc)


E = TypeVar("E", QuoteError, SwapExecutionError)


def wrap_error(wrapper: Type[E], exc: BaseException) -> E:
    """Classify ``exc`` and wrap it in a subsystem error, keeping the inner error as cause."""
    inner = classify_error(exc)
    return wrapper(inner.message, cause=inner)
