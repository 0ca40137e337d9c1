"""
Tool Registry and Executor for structured tool calls.

Each tool pairs a definition (name, description, JSON input schema generated
from a pydantic argument model) with a handler on the GatewayService. The
executor validates the argument shape, runs the handler and always returns a
ToolCallResult: it never raises past its boundary.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import InvalidArgumentsError, MonorailError
from ..services.gateway import GatewayService
from ..types import (
    GetTokenArgs,
    GetTokenCountArgs,
    GetTokensArgs,
    GetTokensByCategoryArgs,
    GetWalletBalancesArgs,
    QuoteRequest,
    ResolveTokenArgs,
    SwapRequest,
)


class ToolDefinition(BaseModel):
    """Definition of a tool that can be called by an agent"""
    name: str
    description: str
    input_schema: Dict[str, Any] = Field(default_factory=dict)

    def to_mcp_format(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Result of a tool call: text content plus an error marker"""
    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    @classmethod
    def ok(cls, text: str) -> "ToolCallResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, text: str) -> "ToolCallResult":
        return cls(content=[TextContent(text=text)], is_error=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


@dataclass
class RegisteredTool:
    """A tool registered in the registry with its definition and handler."""
    definition: ToolDefinition
    handler: Callable[[BaseModel], Coroutine[Any, Any, Any]]
    args_model: Type[BaseModel]


def _input_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    schema = model.model_json_schema(by_alias=True)
    schema.pop("title", None)
    schema.setdefault("properties", {})
    return schema


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    return result


class ToolRegistry:
    """
    Registry of the tools exposed over the tool-invocation surface.
    """

    def __init__(self, gateway: GatewayService, logger: Optional[logging.Logger] = None):
        self.gateway = gateway
        self._tools: Dict[str, RegisteredTool] = {}
        self.logger = logger or logging.getLogger(__name__)
        self._register_default_tools()

    def register(
        self,
        name: str,
        description: str,
        args_model: Type[BaseModel],
        handler: Callable[[Any], Coroutine[Any, Any, Any]],
    ) -> None:
        """Register a tool with its argument shape and handler."""
        self._tools[name] = RegisteredTool(
            definition=ToolDefinition(
                name=name,
                description=description,
                input_schema=_input_schema(args_model),
            ),
            handler=handler,
            args_model=args_model,
        )

    def get_definitions(self) -> List[ToolDefinition]:
        return [tool.definition for tool in self._tools.values()]

    def get_tool(self, name: str) -> Optional[RegisteredTool]:
        return self._tools.get(name)

    def _register_default_tools(self) -> None:
        gateway = self.gateway

        self.register(
            "get_token",
            (
                "Get a token based on the contract address, you must provide a contract address "
                "for a token. The contract address must be on Monad and come from this API"
            ),
            GetTokenArgs,
            gateway.get_token,
        )

        self.register(
            "get_tokens",
            (
                "Get a list of all available tokens with optional filtering and pagination. "
                "Use this to find tokens by name or ticker."
            ),
            GetTokensArgs,
            gateway.get_tokens,
        )

        self.register(
            "get_tokens_by_category",
            (
                "Get a list of tokens in a specific category. "
                "Categories include wallet, verified, stable, lst, bridged, and meme. "
                "When using the 'wallet' category, an address parameter is required. "
                "Verified and wallet must be preferred, ask for confirmation when using any other"
            ),
            GetTokensByCategoryArgs,
            gateway.get_tokens_by_category,
        )

        self.register(
            "get_token_count",
            "Get the total count of available tokens",
            GetTokenCountArgs,
            lambda _args: gateway.get_token_count(),
        )

        self.register(
            "get_wallet_balances",
            "Get the balances of all tokens for an address",
            GetWalletBalancesArgs,
            gateway.get_wallet_balances,
        )

        self.register(
            "resolve_token",
            (
                "Resolve a token symbol, the native asset alias or a contract address to the "
                "address used for quotes. Verified tokens are preferred over search results."
            ),
            ResolveTokenArgs,
            gateway.resolve_token,
        )

        self.register(
            "get_quote",
            (
                "Get a quote for a token swap from the Monorail API. "
                "Retrieve the best available price and transaction details for swapping one token to another. "
                "You must provide an address to get transaction information. "
                "You should resolve the token name or symbol to address using the data API, "
                "verified and wallet must be preferred, ask for confirmation when using any other. "
                "Once resolved, use the information to get a quote using this quote call. "
                "You must alert the user if the price impact is higher than 20%. "
                "It is advised to check the user wallet balance for the input token and alert them "
                "if the balance is too low to complete the swap"
            ),
            QuoteRequest,
            gateway.get_quote,
        )

        self.register(
            "execute_swap",
            (
                "Execute a token swap on the Monorail DEX. "
                "This will actually perform the swap transaction after getting a quote. "
                "REQUIRES a sender address to execute the transaction. "
                "You should always get a quote first to show the user the expected output and price impact. "
                "Warn users about high price impact (>20%) and check their balance before executing. "
                "This is a live transaction that will spend real tokens."
            ),
            SwapRequest,
            gateway.execute_swap,
        )


class ToolExecutor:
    """
    Executes tool calls against the registry.

    Calls run one at a time; a swap call must never be replayed automatically.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        logger: Optional[logging.Logger] = None,
    ):
        self.registry = registry
        self.logger = logger or logging.getLogger(__name__)

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolCallResult:
        """Execute a single tool call and return the text-wrapped result."""
        tool = self.registry.get_tool(name)

        if not tool:
            return ToolCallResult.error(f"Error: Unknown tool: {name}")

        try:
            try:
                args = tool.args_model.model_validate(arguments or {})
            except PydanticValidationError as exc:
                raise InvalidArgumentsError(name, str(exc)) from exc

            result = await tool.handler(args)
            return ToolCallResult.ok(json.dumps(_to_jsonable(result), indent=2))
        except Exception as e:
            message = e.message if isinstance(e, MonorailError) else str(e)
            self.logger.error(f"Tool call error for {name}: {message}")
            return ToolCallResult.error(f"Error: {message}")
