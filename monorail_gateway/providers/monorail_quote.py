"""Async client for the Monorail pathfinder (quote + swap) API."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Optional

import httpx

from .base import SwapProvider
from ..config import settings
from ..core.errors import QuoteError, SwapExecutionError, wrap_error
from ..types import QuoteRequest, SwapRequest, SwapResult

if TYPE_CHECKING:
    from ..services.token_resolution import TokenResolutionService

logger = logging.getLogger(__name__)


def format_amount(amount: Any) -> str:
    """Render a human-readable amount without scientific notation."""
    if isinstance(amount, float):
        return format(Decimal(repr(amount)), "f")
    return str(amount).strip()


class MonorailQuoteProvider(SwapProvider):
    """Quote and swap execution against the Monorail pathfinder.

    Token identifiers are resolved to addresses before every request. The
    configured ``source_id`` is appended to each request for fee attribution.
    The swap POST is not idempotent and is never retried.
    """

    name = "monorail_quote"

    def __init__(
        self,
        resolver: TokenResolutionService,
        base_url: Optional[str] = None,
        *,
        source_id: Optional[str] = None,
        enable_execution: Optional[bool] = None,
        timeout_s: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(
            base_url or settings.monorail_quote_api_url,
            timeout_s=timeout_s if timeout_s is not None else settings.request_timeout_seconds,
            transport=transport,
        )
        self.resolver = resolver
        self.source_id = source_id or settings.monorail_source_id
        self.enable_execution = (
            settings.enable_swap_execution if enable_execution is None else enable_execution
        )

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "unavailable", "reason": "No quote API URL configured"}
        return {
            "status": "configured",
            "base_url": self.base_url,
            "execution_enabled": self.enable_execution,
        }

    def build_params(self, request: QuoteRequest, from_address: str, to_address: str) -> Dict[str, str]:
        params: Dict[str, str] = {
            "amount": format_amount(request.amount),
            "from": from_address,
            "to": to_address,
        }
        if request.sender:
            params["sender"] = request.sender
        if request.slippage is not None:
            params["slippage"] = str(request.slippage)
        if request.deadline is not None:
            params["deadline"] = str(request.deadline)
        if request.max_hops is not None:
            params["max_hops"] = str(request.max_hops)
        if request.excluded:
            params["excluded"] = request.excluded
        params["source"] = self.source_id
        return params

    async def get_quote(self, request: QuoteRequest) -> Dict[str, Any]:
        # Resolution failures propagate as TokenNotFoundError, not QuoteError
        from_address, to_address = await self.resolver.resolve_pair(request.from_token, request.to_token)
        params = self.build_params(request, from_address, to_address)

        try:
            response = await self._request("GET", "/quote", params=params)
            return response.json()
        except Exception as exc:
            error = wrap_error(QuoteError, exc)
            logger.error(error.message, extra={"from": from_address, "to": to_address})
            raise error from exc

    async def execute_swap(self, request: SwapRequest) -> SwapResult:
        if not self.enable_execution:
            raise SwapExecutionError("Swap execution is disabled on this server")

        try:
            quote = await self.get_quote(request)

            from_address, to_address = await self.resolver.resolve_pair(request.from_token, request.to_token)
            params = self.build_params(request, from_address, to_address)
            params["sender"] = request.sender

            response = await self._request("POST", "/swap", params=params)
            transaction = response.json()
        except Exception as exc:
            error = wrap_error(SwapExecutionError, exc)
            logger.error(error.message, extra={"sender": request.sender})
            raise error from exc

        logger.info(
            "Swap transaction prepared",
            extra={"from": from_address, "to": to_address, "sender": request.sender},
        )
        return SwapResult(
            quote=quote,
            transaction=transaction,
            success=True,
            message="Swap executed successfully",
        )
