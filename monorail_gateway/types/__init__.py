from .tokens import TokenCategory, TokenDetails, TokenResult, SwapResult
from .requests import (
    GetTokenArgs,
    GetTokenCountArgs,
    GetTokensArgs,
    GetTokensByCategoryArgs,
    GetWalletBalancesArgs,
    QuoteRequest,
    ResolveTokenArgs,
    SwapRequest,
)

__all__ = [
    "TokenCategory",
    "TokenDetails",
    "TokenResult",
    "SwapResult",
    "GetTokenArgs",
    "GetTokenCountArgs",
    "GetTokensArgs",
    "GetTokensByCategoryArgs",
    "GetWalletBalancesArgs",
    "QuoteRequest",
    "ResolveTokenArgs",
    "SwapRequest",
]
