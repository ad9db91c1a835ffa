from .google_search import GoogleSearchTool, build_search_url
from .registry import ToolRegistry, get_tool_registry

__all__ = ["GoogleSearchTool", "build_search_url", "ToolRegistry", "get_tool_registry"]
