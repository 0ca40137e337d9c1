"""
Tests for the tool registry, executor and MCP server wiring.

The gateway is a mock; these check definitions, argument shape handling and
the text/isError result contract.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import mcp.types as types
import pytest

from monorail_gateway.core.errors import QuoteError, TokenNotFoundError, ValidationError
from monorail_gateway.tools import ToolCallResult, ToolExecutor, ToolRegistry
from monorail_gateway.tools.mcp_server import SERVER_NAME, build_server
from monorail_gateway.types import QuoteRequest, SwapResult

EXPECTED_TOOLS = {
    "get_token",
    "get_tokens",
    "get_tokens_by_category",
    "get_token_count",
    "get_wallet_balances",
    "resolve_token",
    "get_quote",
    "execute_swap",
}


@pytest.fixture
def gateway():
    service = MagicMock()
    service.get_token = AsyncMock(return_value={"address": "0x" + "a" * 40, "symbol": "AAA"})
    service.get_tokens = AsyncMock(return_value=[])
    service.get_tokens_by_category = AsyncMock(return_value=[])
    service.get_token_count = AsyncMock(return_value=1234)
    service.get_wallet_balances = AsyncMock(return_value=[])
    service.resolve_token = AsyncMock(return_value={"identifier": "MON", "address": "0x" + "0" * 40})
    service.get_quote = AsyncMock(return_value={"output_formatted": "3.2"})
    service.execute_swap = AsyncMock(
        return_value=SwapResult(quote={}, transaction={"to": "0xrouter"}, success=True, message="Swap executed successfully")
    )
    return service


@pytest.fixture
def registry(gateway):
    return ToolRegistry(gateway)


@pytest.fixture
def executor(registry):
    return ToolExecutor(registry)


class TestDefinitions:

    def test_all_tools_registered(self, registry):
        names = {definition.name for definition in registry.get_definitions()}
        assert names == EXPECTED_TOOLS

    def test_quote_schema_uses_wire_names(self, registry):
        schema = registry.get_tool("get_quote").definition.input_schema

        assert schema["type"] == "object"
        assert {"amount", "from", "to"} <= set(schema["required"])
        assert "from_token" not in schema["properties"]
        assert "title" not in schema

    def test_swap_schema_requires_sender(self, registry):
        schema = registry.get_tool("execute_swap").definition.input_schema
        assert "sender" in schema["required"]

    def test_count_schema_has_no_properties(self, registry):
        schema = registry.get_tool("get_token_count").definition.input_schema
        assert schema["properties"] == {}

    def test_mcp_format(self, registry):
        payload = registry.get_tool("get_token").definition.to_mcp_format()
        assert set(payload) == {"name", "description", "inputSchema"}


class TestExecutor:

    @pytest.mark.asyncio
    async def test_count_is_json_text(self, executor):
        result = await executor.call_tool("get_token_count", {})

        assert result.is_error is False
        assert result.text == "1234"

    @pytest.mark.asyncio
    async def test_result_is_pretty_printed(self, executor, gateway):
        result = await executor.call_tool("get_quote", {"amount": "1", "from": "MON", "to": "USDC"})

        assert result.text == json.dumps({"output_formatted": "3.2"}, indent=2)
        request = gateway.get_quote.await_args.args[0]
        assert isinstance(request, QuoteRequest)
        assert request.from_token == "MON"

    @pytest.mark.asyncio
    async def test_swap_result_serialized(self, executor):
        result = await executor.call_tool(
            "execute_swap",
            {"amount": 1, "from": "MON", "to": "USDC", "sender": "0x" + "b" * 40},
        )

        assert json.loads(result.text)["transaction"] == {"to": "0xrouter"}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, executor):
        result = await executor.call_tool("drop_tables", {})

        assert result.is_error is True
        assert result.text == "Error: Unknown tool: drop_tables"

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, executor, gateway):
        result = await executor.call_tool("get_quote", {"from": "MON"})

        assert result.is_error is True
        assert result.text.startswith("Error: Invalid arguments for get_quote")
        gateway.get_quote.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_arguments_treated_as_empty(self, executor):
        result = await executor.call_tool("get_token_count", None)
        assert result.is_error is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error,expected", [
        (ValidationError("amount must be greater than 0", field="amount"), "Error: amount must be greater than 0"),
        (TokenNotFoundError("ZZZ"), "Error: Token not found: ZZZ"),
        (QuoteError("Server error occurred"), "Error: Quote API Error: Server error occurred"),
        (RuntimeError("unexpected"), "Error: unexpected"),
    ])
    async def test_domain_errors_become_error_results(self, executor, gateway, error, expected):
        gateway.get_quote.side_effect = error

        result = await executor.call_tool("get_quote", {"amount": "1", "from": "MON", "to": "USDC"})

        assert result.is_error is True
        assert result.text == expected

    def test_result_wire_shape(self):
        payload = ToolCallResult.error("Error: nope").to_dict()
        assert payload == {"content": [{"type": "text", "text": "Error: nope"}], "isError": True}


class TestMcpServer:

    def test_server_name(self, executor):
        assert build_server(executor).name == SERVER_NAME

    @pytest.mark.asyncio
    async def test_lists_registry_tools(self, executor):
        server = build_server(executor)
        handler = server.request_handlers[types.ListToolsRequest]

        response = await handler(types.ListToolsRequest(method="tools/list"))

        tools = response.root.tools
        assert {tool.name for tool in tools} == EXPECTED_TOOLS
        quote_tool = next(tool for tool in tools if tool.name == "get_quote")
        assert "from" in quote_tool.inputSchema["properties"]
