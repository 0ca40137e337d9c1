"""Async client for the Monorail token data API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from .base import TokenDataProvider
from ..config import settings
from ..core.errors import classify_error
from ..types import TokenCategory

logger = logging.getLogger(__name__)


class MonorailDataProvider(TokenDataProvider):
    """Thin typed accessors over the Monorail data API.

    Each call is exactly one round trip. Payloads are returned as decoded,
    failures are classified and re-raised.
    """

    name = "monorail_data"

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout_s: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(
            base_url or settings.monorail_data_api_url,
            timeout_s=timeout_s if timeout_s is not None else settings.request_timeout_seconds,
            transport=transport,
        )

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = await self._request("GET", path, params=params)
            return response.json()
        except Exception as exc:
            error = classify_error(exc)
            logger.error(f"Data API Error: {error.message}", extra={"path": path, "status": error.status_code})
            raise error from exc

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "unavailable", "reason": "No data API URL configured"}

        try:
            count = await self.get_token_count()
            return {"status": "healthy", "token_count": count}
        except Exception as e:
            return {"status": "error", "reason": str(e)}

    async def get_token(self, address: str) -> Dict[str, Any]:
        return await self._get(f"/token/{address}")

    async def get_tokens(
        self,
        find: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        return await self._get("/tokens", {"find": find, "offset": offset, "limit": limit})

    async def get_tokens_by_category(
        self,
        category: Union[TokenCategory, str],
        address: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        slug = category.value if isinstance(category, TokenCategory) else str(category)
        return await self._get(
            f"/tokens/category/{slug}",
            {"address": address, "offset": offset, "limit": limit},
        )

    async def get_token_count(self) -> int:
        return await self._get("/tokens/count")

    async def get_wallet_balances(self, address: str) -> List[Dict[str, Any]]:
        return await self._get(f"/wallet/{address}/balances")
