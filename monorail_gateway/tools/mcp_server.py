"""
MCP tool server for the Monorail gateway.

Exposes every tool in the ToolRegistry over the Model Context Protocol using
the SDK's low-level server, so the advertised input schemas are exactly the
ones generated from the argument models (``from``/``to`` included).

Run standalone with ``monorail-mcp`` or ``python -m monorail_gateway.tools.mcp_server``.
Logs go to stderr: stdout carries the protocol stream.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .. import __version__
from ..logging_config import setup_logging
from ..services.gateway import get_gateway_service
from .registry import ToolExecutor, ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "monorail-api-server"


class ToolCallFailed(Exception):
    """Raised inside the MCP handler so the SDK marks the result with isError."""


def build_server(executor: ToolExecutor) -> Server:
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=definition.name,
                description=definition.description,
                inputSchema=definition.input_schema,
            )
            for definition in executor.registry.get_definitions()
        ]

    # Argument shapes are checked by the executor so failures keep its message format
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        logger.info(f"{name} called", extra={"tool": name})
        result = await executor.call_tool(name, arguments)
        if result.is_error:
            raise ToolCallFailed(result.text)
        return [types.TextContent(type="text", text=item.text) for item in result.content]

    return server


def create_executor() -> ToolExecutor:
    return ToolExecutor(ToolRegistry(get_gateway_service()))


async def serve() -> None:
    server = build_server(create_executor())
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    setup_logging(stream=sys.stderr)
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("MCP server stopped")


if __name__ == "__main__":
    run()
