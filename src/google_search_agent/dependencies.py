from typing import AsyncIterator

import httpx
from fastapi import Depends

from .config import get_settings
from .tools import ToolRegistry, get_tool_registry

async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    One outbound client per protocol request, closed once the request is done.
    """
    settings = get_settings()
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.SEARCH_TIMEOUT_SECONDS)) as client:
        yield client

def get_registry(client: httpx.AsyncClient = Depends(get_http_client)) -> ToolRegistry:
    return get_tool_registry(client)
