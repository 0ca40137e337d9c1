from .errors import (
    ApiError,
    ErrorKind,
    InvalidArgumentsError,
    MonorailError,
    QuoteError,
    SwapExecutionError,
    TokenNotFoundError,
    ValidationError,
    classify_error,
    wrap_error,
)

__all__ = [
    "ApiError",
    "ErrorKind",
    "InvalidArgumentsError",
    "MonorailError",
    "QuoteError",
    "SwapExecutionError",
    "TokenNotFoundError",
    "ValidationError",
    "classify_error",
    "wrap_error",
]
