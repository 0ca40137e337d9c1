from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..services.gateway import GatewayService, get_gateway_service
from ..types import (
    GetTokenArgs,
    GetTokensArgs,
    GetTokensByCategoryArgs,
    GetWalletBalancesArgs,
    TokenCategory,
)
from .responses import failure_response

router = APIRouter(prefix="/api")


@router.get("/tokens")
async def list_tokens(
    find: Optional[str] = Query(None, description="Partial name or ticker of the token to find"),
    offset: Optional[int] = Query(None, description="Offset to start the list from"),
    limit: Optional[int] = Query(None, description="Maximum number of tokens to return"),
    gateway: GatewayService = Depends(get_gateway_service),
):
    """Get all tokens with optional filtering"""
    try:
        result = await gateway.get_tokens(GetTokensArgs(find=find, offset=offset, limit=limit))
    except Exception as exc:
        return failure_response(exc, "Failed to fetch tokens")

    return {"success": True, "data": result, "count": len(result)}


# Registered before /tokens/{address} so "count" is not taken for an address
@router.get("/tokens/count")
async def token_count(gateway: GatewayService = Depends(get_gateway_service)):
    try:
        result = await gateway.get_token_count()
    except Exception as exc:
        return failure_response(exc, "Failed to fetch token count")

    return {"success": True, "data": {"count": result}, "total_tokens": result}


@router.get("/tokens/category/{category}")
async def tokens_by_category(
    category: TokenCategory,
    address: Optional[str] = Query(None, description="Wallet address to include balances for"),
    offset: int = Query(0, description="Pagination offset"),
    limit: int = Query(500, description="Maximum number of results to return"),
    gateway: GatewayService = Depends(get_gateway_service),
):
    try:
        result = await gateway.get_tokens_by_category(
            GetTokensByCategoryArgs(category=category, address=address, offset=offset, limit=limit)
        )
    except Exception as exc:
        return failure_response(exc, "Failed to fetch tokens by category")

    return {
        "success": True,
        "data": result,
        "category": category.value,
        "count": len(result),
    }


@router.get("/tokens/{address}")
async def token_by_address(
    address: str,
    gateway: GatewayService = Depends(get_gateway_service),
):
    try:
        result = await gateway.get_token(GetTokenArgs(contractAddress=address))
    except Exception as exc:
        return failure_response(exc, "Failed to fetch token")

    return {"success": True, "data": result}


@router.get("/wallet/{address}/balances")
async def wallet_balances(
    address: str,
    gateway: GatewayService = Depends(get_gateway_service),
):
    try:
        result = await gateway.get_wallet_balances(GetWalletBalancesArgs(address=address))
    except Exception as exc:
        return failure_response(exc, "Failed to fetch wallet balances")

    return {
        "success": True,
        "data": result,
        "wallet": address,
        "balances_count": len(result),
    }
