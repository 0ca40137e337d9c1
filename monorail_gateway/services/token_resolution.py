"""
Token Resolution Service.

Turns a user-supplied token identifier into a contract address:

1. Anything already shaped like an address is returned verbatim
2. The native alias (MON by default) maps to the zero-address placeholder
3. Verified tokens are preferred, matched on exact symbol
4. Free-text search falls back to an exact symbol match, then the first hit

Directory lookup failures never escape from here: they are logged and treated
as "no match", so an unknown identifier always ends in TokenNotFoundError.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import ValidationError as PydanticValidationError

from ..config import settings
from ..core.errors import TokenNotFoundError
from ..providers.base import TokenDataProvider
from ..types import TokenCategory, TokenResult

logger = logging.getLogger(__name__)

NATIVE_TOKEN_ADDRESS = "0x0000000000000000000000000000000000000000"


def looks_like_address(identifier: str) -> bool:
    """Loose shape check; checksum and exact length are not enforced here."""
    return identifier.startswith("0x") and len(identifier) >= 40


def _parse_tokens(payload: Any) -> List[TokenResult]:
    """Parse directory entries one by one, skipping any that are malformed."""
    if not isinstance(payload, list):
        return []

    tokens: List[TokenResult] = []
    for item in payload:
        try:
            tokens.append(TokenResult.model_validate(item))
        except PydanticValidationError as exc:
            logger.debug(f"Skipping malformed token entry: {exc.error_count()} error(s)")
    return tokens


def _find_symbol(tokens: Sequence[TokenResult], symbol: str) -> Optional[TokenResult]:
    target = symbol.lower()
    for token in tokens:
        if token.symbol.lower() == target:
            return token
    return None


class TokenResolutionService:
    """Resolve symbols and aliases to canonical token addresses."""

    def __init__(
        self,
        data_provider: TokenDataProvider,
        native_symbol: Optional[str] = None,
    ) -> None:
        self.data_provider = data_provider
        self.native_symbol = (native_symbol or settings.native_token_symbol).lower()

    async def resolve(self, identifier: str) -> str:
        if looks_like_address(identifier):
            return identifier

        if identifier.lower() == self.native_symbol:
            return NATIVE_TOKEN_ADDRESS

        try:
            address = await self._resolve_via_directory(identifier)
        except Exception as exc:
            logger.warning(
                f"Error resolving token: {exc}",
                extra={"identifier": identifier},
            )
            address = None

        if address is None:
            raise TokenNotFoundError(identifier)
        return address

    async def resolve_pair(self, from_identifier: str, to_identifier: str) -> Tuple[str, str]:
        from_address = await self.resolve(from_identifier)
        to_address = await self.resolve(to_identifier)
        return from_address, to_address

    async def _resolve_via_directory(self, identifier: str) -> Optional[str]:
        verified = _parse_tokens(
            await self.data_provider.get_tokens_by_category(TokenCategory.VERIFIED)
        )
        match = _find_symbol(verified, identifier)
        if match:
            logger.debug(f"Resolved {identifier} from verified tokens")
            return match.address

        results = _parse_tokens(await self.data_provider.get_tokens(find=identifier))
        if not results:
            return None

        match = _find_symbol(results, identifier)
        if match:
            return match.address

        logger.debug(f"No exact symbol match for {identifier}, using first search result")
        return results[0].address


_service_instance: Optional[TokenResolutionService] = None


def get_token_resolution_service() -> TokenResolutionService:
    """Get the process-wide resolver backed by the default data provider."""
    global _service_instance
    if _service_instance is None:
        from ..providers.monorail_data import MonorailDataProvider

        _service_instance = TokenResolutionService(MonorailDataProvider())
    return _service_instance
