from .base import HttpProvider, Provider, SwapProvider, TokenDataProvider
from .monorail_data import MonorailDataProvider
from .monorail_quote import MonorailQuoteProvider

__all__ = [
    "HttpProvider",
    "Provider",
    "SwapProvider",
    "TokenDataProvider",
    "MonorailDataProvider",
    "MonorailQuoteProvider",
]
