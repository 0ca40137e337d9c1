from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..services.gateway import GatewayService, get_gateway_service

router = APIRouter()

_OK_STATUSES = {"healthy", "configured"}


@router.get("/healthz")
async def health_check(gateway: GatewayService = Depends(get_gateway_service)) -> Dict[str, Any]:
    """Health check endpoint that verifies provider status"""

    provider_status = {
        gateway.data_provider.name: await gateway.data_provider.health_check(),
        gateway.quote_provider.name: await gateway.quote_provider.health_check(),
    }

    available_providers = sum(
        1 for status in provider_status.values()
        if status["status"] in _OK_STATUSES
    )

    return {
        "status": "healthy" if available_providers == len(provider_status) else "degraded",
        "providers": provider_status,
        "available_providers": available_providers,
        "total_providers": len(provider_status),
    }
