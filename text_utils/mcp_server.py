"""MCP Server – exposes the text operations as tools for Cursor, Claude Desktop, etc."""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from text_utils.registry import OPERATIONS, UnknownOperationError, apply_all, get_operation

mcp = FastMCP(
    name="TextUtils",
    instructions=(
        "TextUtils: pure string helpers for case conversion, truncation, "
        "whitespace cleanup, word counts and palindrome checks."
    ),
)


@mcp.tool()
def list_operations() -> str:
    """List every available text operation.

    Returns:
        JSON string with each operation's name, return type and summary.
    """
    return json.dumps({
        "operations": [
            {"name": op.name, "returns": op.returns.__name__, "summary": op.summary}
            for op in OPERATIONS.values()
        ],
    }, indent=2)


@mcp.tool()
def transform_text(operation: str, text: str, max_length: float | None = None) -> str:
    """Apply a single text operation.

    Args:
        operation: Operation name, e.g. ``camel_case`` or ``camelCase``.
        text: The text to transform.
        max_length: Optional length limit, only valid for ``truncate``.

    Returns:
        JSON string with the operation and its result, or an error.
    """
    try:
        op = get_operation(operation)
        result = op(text, max_length)
    except (UnknownOperationError, ValueError) as exc:
        return json.dumps({"error": str(exc)})

    return json.dumps({"operation": op.name, "result": result}, indent=2)


@mcp.tool()
def analyze_text(text: str) -> str:
    """Run every text operation on *text* with default settings.

    Args:
        text: The text to analyze.

    Returns:
        JSON string mapping each operation name to its result.
    """
    return json.dumps({"text": text, "results": apply_all(text)}, indent=2)


def run_server() -> None:
    """Start the MCP server using stdio transport."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
