from fastapi import APIRouter, Depends

from ..services.gateway import GatewayService, get_gateway_service
from ..types import QuoteRequest, SwapRequest
from .responses import failure_response

router = APIRouter(prefix="/api")


@router.post("/quote")
async def post_quote(
    req: QuoteRequest,
    gateway: GatewayService = Depends(get_gateway_service),
):
    """Get a swap quote; `from`/`to` may be symbols or addresses."""
    try:
        result = await gateway.get_quote(req)
    except Exception as exc:
        return failure_response(exc, "Failed to get quote")

    return {
        "success": True,
        "data": result,
        "quote_for": {
            "amount": req.amount,
            "from": req.from_token,
            "to": req.to_token,
        },
    }


@router.post("/swap")
async def post_swap(
    req: SwapRequest,
    gateway: GatewayService = Depends(get_gateway_service),
):
    """Quote, then request the prepared swap transaction. Never retried."""
    try:
        result = await gateway.execute_swap(req)
    except Exception as exc:
        return failure_response(exc, "Failed to execute swap")

    return {
        "success": True,
        "data": result.model_dump(mode="json"),
        "swap_executed": {
            "amount": req.amount,
            "from": req.from_token,
            "to": req.to_token,
            "sender": req.sender,
        },
    }
