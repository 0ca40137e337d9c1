"""
Gateway service shared by the HTTP routes and the tool executor.

Each operation takes an already-shaped argument model, runs input validation
(nothing reaches the network on failure) and delegates to the data or quote
provider. Results are returned undecorated; envelopes belong to the surfaces.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core import validators
from ..providers.base import SwapProvider, TokenDataProvider
from ..types import (
    GetTokenArgs,
    GetTokensArgs,
    GetTokensByCategoryArgs,
    GetWalletBalancesArgs,
    QuoteRequest,
    ResolveTokenArgs,
    SwapRequest,
    SwapResult,
)
from .token_resolution import TokenResolutionService, get_token_resolution_service

logger = logging.getLogger(__name__)


def _validate_quote_inputs(args: QuoteRequest) -> None:
    validators.validate_amount(args.amount)
    if args.sender:
        validators.validate_address(args.sender, "sender")
    validators.validate_slippage(args.slippage)
    validators.validate_deadline(args.deadline)
    validators.validate_max_hops(args.max_hops)


class GatewayService:
    """Validated entry points for every inbound operation."""

    def __init__(
        self,
        data_provider: TokenDataProvider,
        quote_provider: SwapProvider,
        resolver: TokenResolutionService,
    ) -> None:
        self.data_provider = data_provider
        self.quote_provider = quote_provider
        self.resolver = resolver

    async def get_token(self, args: GetTokenArgs) -> Dict[str, Any]:
        validators.validate_address(args.contractAddress, "contractAddress")
        return await self.data_provider.get_token(args.contractAddress)

    async def get_tokens(self, args: GetTokensArgs) -> List[Dict[str, Any]]:
        validators.validate_pagination(args.offset, args.limit)
        return await self.data_provider.get_tokens(
            find=args.find,
            offset=args.offset,
            limit=args.limit,
        )

    async def get_tokens_by_category(self, args: GetTokensByCategoryArgs) -> List[Dict[str, Any]]:
        validators.validate_pagination(args.offset, args.limit)
        if args.address:
            validators.validate_address(args.address, "address")
        elif args.category.requires_address:
            # Left to the upstream service to decide; its contract is not strict here
            logger.warning("wallet category requested without an address")

        return await self.data_provider.get_tokens_by_category(
            args.category,
            address=args.address,
            offset=args.offset,
            limit=args.limit,
        )

    async def get_token_count(self) -> int:
        return await self.data_provider.get_token_count()

    async def get_wallet_balances(self, args: GetWalletBalancesArgs) -> List[Dict[str, Any]]:
        validators.validate_address(args.address, "address")
        return await self.data_provider.get_wallet_balances(args.address)

    async def get_quote(self, args: QuoteRequest) -> Dict[str, Any]:
        _validate_quote_inputs(args)
        return await self.quote_provider.get_quote(args)

    async def execute_swap(self, args: SwapRequest) -> SwapResult:
        # Stricter than quoting: a sender is mandatory for execution
        validators.validate_address(args.sender, "sender")
        _validate_quote_inputs(args)
        return await self.quote_provider.execute_swap(args)

    async def resolve_token(self, args: ResolveTokenArgs) -> Dict[str, Any]:
        address = await self.resolver.resolve(args.identifier)
        return {"identifier": args.identifier, "address": address}


_gateway_instance: Optional[GatewayService] = None


def get_gateway_service() -> GatewayService:
    """Get the process-wide gateway wired to the Monorail providers."""
    global _gateway_instance
    if _gateway_instance is None:
        from ..providers.monorail_quote import MonorailQuoteProvider

        resolver = get_token_resolution_service()
        _gateway_instance = GatewayService(
            data_provider=resolver.data_provider,
            quote_provider=MonorailQuoteProvider(resolver),
            resolver=resolver,
        )
    return _gateway_instance
