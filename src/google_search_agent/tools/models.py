from typing import Any, Awaitable, Dict, List, Protocol

from mcp.types import CallToolResult
from pydantic import BaseModel, Field

class SearchResult(BaseModel):
    title: str
    link: str

class SearchToolArgs(BaseModel):
    query: str = Field(..., min_length=1, description="The search terms to query.")

class GoogleSearchItem(BaseModel):
    title: str
    link: str

class GoogleSearchResponse(BaseModel):
    # Google omits "items" entirely when a query has no hits
    items: List[GoogleSearchItem] = Field(default_factory=list)

class ToolHandler(Protocol):
    def __call__(self, arguments: Dict[str, Any]) -> Awaitable[CallToolResult]:
        ...
