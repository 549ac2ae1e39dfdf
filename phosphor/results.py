"""
Helpers for building tool results.
"""
from mcp.types import CallToolResult, TextContent


def text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def error_result(text: str) -> CallToolResult:
    """Tool result flagged as an error, so the client can tell it from a normal answer."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)
