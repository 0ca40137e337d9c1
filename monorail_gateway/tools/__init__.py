from .registry import (
    RegisteredTool,
    TextContent,
    ToolCallResult,
    ToolDefinition,
    ToolExecutor,
    ToolRegistry,
)

__all__ = [
    "RegisteredTool",
    "TextContent",
    "ToolCallResult",
    "ToolDefinition",
    "ToolExecutor",
    "ToolRegistry",
]
