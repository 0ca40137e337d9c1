"""Tests for error classification and wrapping."""

import httpx
import pytest

from monorail_gateway.core.errors import (
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


def _status_error(status: int, **kwargs) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://data.test/v1/tokens")
    response = httpx.Response(status, request=request, **kwargs)
    return httpx.HTTPStatusError(f"HTTP {status}", request=request, response=response)


class TestClassifyError:

    def test_domain_errors_pass_through(self):
        original = TokenNotFoundError("FOO")
        assert classify_error(original) is original

    def test_not_found(self):
        error = classify_error(_status_error(404))
        assert isinstance(error, ApiError)
        assert error.message == "Resource not found"
        assert error.status_code == 404

    def test_bad_request_uses_upstream_message(self):
        error = classify_error(_status_error(400, json={"message": "amount too small"}))
        assert isinstance(error, ValidationError)
        assert error.message == "amount too small"

    def test_bad_request_without_body(self):
        error = classify_error(_status_error(400, text="not json"))
        assert isinstance(error, ValidationError)
        assert error.message == "Bad request"

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_server_errors_keep_status(self, status):
        error = classify_error(_status_error(status))
        assert isinstance(error, ApiError)
        assert error.message == "Server error occurred"
        assert error.status_code == status

    def test_connection_failures(self):
        request = httpx.Request("GET", "https://nowhere.test")
        error = classify_error(httpx.ConnectError("[Errno -2] Name or service not known", request=request))
        assert isinstance(error, ApiError)
        assert error.message == "Network connection failed"
        assert error.status_code is None

    def test_other_status_keeps_best_message(self):
        error = classify_error(_status_error(429, json={"message": "slow down"}))
        assert isinstance(error, ApiError)
        assert error.message == "slow down"
        assert error.status_code == 429

    def test_unknown_failures(self):
        error = classify_error(RuntimeError("boom"))
        assert isinstance(error, ApiError)
        assert error.message == "boom"
        assert error.status_code is None

        assert classify_error(RuntimeError()).message == "Unknown error occurred"


class TestWrapping:

    def test_quote_error_wraps_classified_cause(self):
        error = wrap_error(QuoteError, _status_error(503))

        assert isinstance(error, QuoteError)
        assert error.kind is ErrorKind.QUOTE
        assert error.message == "Quote API Error: Server error occurred"
        assert isinstance(error.cause, ApiError)
        assert error.cause.status_code == 503
        assert isinstance(error.root_cause, httpx.HTTPStatusError)

    def test_swap_error_wraps_quote_error(self):
        quote_error = QuoteError("Resource not found", cause=ApiError("Resource not found", 404))
        error = wrap_error(SwapExecutionError, quote_error)

        assert error.message == "Swap Execution Error: Quote API Error: Resource not found"
        assert error.cause is quote_error

        payload = error.to_dict()
        assert payload["kind"] == "swap_execution_error"
        assert payload["cause"]["kind"] == "quote_error"
        assert payload["cause"]["cause"]["status_code"] == 404

    def test_token_not_found_message(self):
        error = TokenNotFoundError("unknown")
        assert error.message == "Token not found: unknown"
        assert error.identifier == "unknown"
        assert error.root_cause is error

    def test_invalid_arguments_is_not_a_domain_error(self):
        error = InvalidArgumentsError("get_quote", "amount: Field required")
        assert not isinstance(error, MonorailError)
        assert str(error) == "Invalid arguments for get_quote: amount: Field required"
