from typing import Any, Dict, List, Optional, Tuple

import httpx
from mcp.types import CallToolResult, Tool

from .exceptions import UnknownToolError
from .google_search import TOOL_NAME, GoogleSearchTool
from .models import ToolHandler


def get_default_tools() -> List[Tool]:
    """
    Definitions advertised through tools/list.
    """
    return [
        Tool(
            name=TOOL_NAME,
            description="Performs a Google Custom Search query.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {"type": "string", "description": "The search terms to query."},
                },
                "required": ["query"],
            },
        )
    ]


def validate_handler(handler: Any) -> ToolHandler:
    if not callable(handler):
        raise TypeError(f"Handler must be callable: {handler}")
    return handler


class ToolRegistry:
    def __init__(self):
        self._tools: Dict[str, Tuple[Tool, ToolHandler]] = {}

    def register(self, tool: Tool, handler: Any) -> None:
        self._tools[tool.name] = (tool, validate_handler(handler))

    def list_tools(self) -> List[Tool]:
        return [tool for tool, _ in self._tools.values()]

    async def call(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        entry = self._tools.get(name)
        if entry is None:
            raise UnknownToolError(name)
        _, handler = entry
        return await handler(arguments or {})


def get_tool_registry(client: httpx.AsyncClient) -> ToolRegistry:
    handlers = {
        TOOL_NAME: GoogleSearchTool(client),
    }

    registry = ToolRegistry()
    for tool in get_default_tools():
        registry.register(tool, handlers[tool.name])
    return registry
