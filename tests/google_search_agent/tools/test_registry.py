import httpx
import pytest
from mcp.types import CallToolResult, TextContent, Tool

from google_search_agent.tools import GoogleSearchTool, ToolRegistry, get_tool_registry
from google_search_agent.tools.exceptions import UnknownToolError


def test_default_registry_lists_google_search():
    registry = get_tool_registry(httpx.AsyncClient())

    tools = registry.list_tools()

    assert [tool.name for tool in tools] == ["google_search"]
    assert tools[0].inputSchema["required"] == ["query"]
    assert tools[0].inputSchema["properties"]["query"]["type"] == "string"


def test_register_rejects_non_callable():
    registry = ToolRegistry()
    with pytest.raises(TypeError):
        registry.register(Tool(name="broken", inputSchema={"type": "object"}), "not a handler")


@pytest.mark.asyncio
async def test_call_dispatches_by_name():
    received = []

    async def echo(arguments):
        received.append(arguments)
        return CallToolResult(content=[TextContent(type="text", text="pong")])

    registry = ToolRegistry()
    registry.register(Tool(name="echo", inputSchema={"type": "object"}), echo)

    result = await registry.call("echo", None)

    assert result.content[0].text == "pong"
    assert received == [{}]


@pytest.mark.asyncio
async def test_call_unknown_tool():
    registry = get_tool_registry(httpx.AsyncClient())
    with pytest.raises(UnknownToolError, match="Unknown tool: web_search"):
        await registry.call("web_search", {"query": "test"})


def test_registry_handler_uses_given_client():
    client = httpx.AsyncClient()
    registry = get_tool_registry(client)

    _, handler = registry._tools["google_search"]

    assert isinstance(handler, GoogleSearchTool)
    assert handler.client is client
