from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class TokenCategory(str, Enum):
    """Token categories as defined by the Monorail data API."""

    WALLET = "wallet"
    VERIFIED = "verified"
    STABLE = "stable"
    LST = "lst"
    BRIDGED = "bridged"
    MEME = "meme"

    @property
    def requires_address(self) -> bool:
        return self is TokenCategory.WALLET


class TokenDetails(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    address: str = Field(description="Token contract address")
    name: str = Field(default="", description="Full token name")
    symbol: str = Field(description="Token symbol")
    decimals: int = Field(default=18, description="Token decimal places")
    categories: List[str] = Field(default_factory=list, description="Categories the token belongs to")

    @field_validator("name", "decimals", "categories", mode="before")
    @classmethod
    def _blank_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Directory entries sometimes carry null or empty strings for these
        if value is None or value == "":
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class TokenResult(TokenDetails):
    """Token entry from list/search endpoints.

    The upstream API sends ``decimals`` as text here; pydantic coerces it to
    an int so both token shapes expose the same type.
    """

    id: Optional[str] = Field(default=None, description="Upstream token identifier")
    balance: Optional[str] = Field(default=None, description="Balance for the requested wallet, if any")
    mon_per_token: Optional[str] = Field(default=None, description="Price in the native asset")
    usd_per_token: Optional[str] = Field(default=None, description="Price in USD")
    pconf: Optional[str] = Field(default=None, description="Price confidence")


class SwapResult(BaseModel):
    quote: Any = Field(description="Quote payload returned before execution")
    transaction: Any = Field(description="Prepared (unsigned) transaction payload")
    success: bool = Field(description="Whether the execution request succeeded")
    message: str = Field(description="Human readable status")
