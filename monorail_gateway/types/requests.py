from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .tokens import TokenCategory


class GetTokenArgs(BaseModel):
    contractAddress: str = Field(description="Token contract address")


class GetTokensArgs(BaseModel):
    find: Optional[str] = Field(default=None, description="The partial name or ticker of the token to find")
    offset: Optional[int] = Field(default=None, description="The offset to start the list from")
    limit: Optional[int] = Field(default=None, description="The maximum amount of tokens to return")


class GetTokensByCategoryArgs(BaseModel):
    category: TokenCategory = Field(
        description=(
            "Category of tokens to fetch, verified and wallet must be preferred, "
            "ask for confirmation when using any other"
        )
    )
    address: Optional[str] = Field(
        default=None,
        description="Monad address to include token balances for (required for wallet category)",
    )
    offset: int = Field(default=0, description="Pagination offset")
    limit: int = Field(default=500, description="Maximum number of results to return")


class GetTokenCountArgs(BaseModel):
    pass


class GetWalletBalancesArgs(BaseModel):
    address: str = Field(description="The address to fetch balances for")


class ResolveTokenArgs(BaseModel):
    identifier: str = Field(description="Token symbol, native alias or contract address")


class QuoteRequest(BaseModel):
    """Arguments for a swap quote. ``from``/``to`` accept symbols or addresses."""

    model_config = ConfigDict(populate_by_name=True)

    amount: Union[str, int, float] = Field(description="Human readable amount to swap")
    from_token: str = Field(
        alias="from",
        description=(
            "Token address to swap from, use the data API verified category "
            "to get the address from the name or symbol"
        ),
    )
    to_token: str = Field(
        alias="to",
        description=(
            "Token address to swap to, use the data API verified category "
            "to get the address from the name or symbol"
        ),
    )
    sender: Optional[str] = Field(default=None, description="Address of the wallet that will execute the transaction")
    slippage: Optional[int] = Field(default=None, description="Slippage tolerance in basis points (default: 50)")
    deadline: Optional[int] = Field(default=None, description="Deadline in seconds (default: 60)")
    max_hops: Optional[int] = Field(default=None, description="Maximum number of hops (1-5, default: 3)")
    excluded: Optional[str] = Field(default=None, description="Comma separated list of protocols to exclude")
    source: Optional[str] = Field(
        default=None,
        description="Source of the request (for fee sharing); the server's configured ID is always used",
    )


class SwapRequest(QuoteRequest):
    sender: str = Field(
        description="Address of the wallet that will execute the transaction (required for swap execution)"
    )
