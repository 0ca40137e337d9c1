from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

import httpx

from ..types import QuoteRequest, SwapRequest, SwapResult, TokenCategory


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: int = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class HttpProvider(Provider):
    """Provider backed by a single JSON HTTP API.

    A fresh ``httpx.AsyncClient`` is opened per request; ``transport`` lets
    callers (tests) substitute the network layer.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        if timeout_s is not None:
            self.timeout_s = timeout_s
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "user-agent": "MonorailGateway/0.2",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        query = {key: value for key, value in (params or {}).items() if value is not None}
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_s,
            transport=self._transport,
        ) as client:
            response = await client.request(method, path, params=query, headers=self._headers())
            response.raise_for_status()
            return response

    async def ready(self) -> bool:
        return bool(self.base_url)


class TokenDataProvider(HttpProvider):
    """Provider for token metadata, listings and wallet balances"""

    @abstractmethod
    async def get_token(self, address: str) -> Dict[str, Any]:
        """Get a token by contract address"""
        pass

    @abstractmethod
    async def get_tokens(
        self,
        find: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Search tokens by partial name or ticker"""
        pass

    @abstractmethod
    async def get_tokens_by_category(
        self,
        category: Union[TokenCategory, str],
        address: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """List tokens in a category"""
        pass

    @abstractmethod
    async def get_token_count(self) -> int:
        """Total number of tokens known to the service"""
        pass

    @abstractmethod
    async def get_wallet_balances(self, address: str) -> List[Dict[str, Any]]:
        """Token balances held by a wallet"""
        pass


class SwapProvider(HttpProvider):
    """Provider for swap quotes and prepared swap transactions"""

    @abstractmethod
    async def get_quote(self, request: QuoteRequest) -> Dict[str, Any]:
        """Get a routed quote for a swap"""
        pass

    @abstractmethod
    async def execute_swap(self, request: SwapRequest) -> SwapResult:
        """Quote, then request the prepared swap transaction"""
        pass
