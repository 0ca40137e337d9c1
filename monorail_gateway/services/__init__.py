"""Service layer helpers"""

from .token_resolution import (
    NATIVE_TOKEN_ADDRESS,
    TokenResolutionService,
    get_token_resolution_service,
)
from .gateway import GatewayService, get_gateway_service

__all__ = [
    "NATIVE_TOKEN_ADDRESS",
    "TokenResolutionService",
    "get_token_resolution_service",
    "GatewayService",
    "get_gateway_service",
]
