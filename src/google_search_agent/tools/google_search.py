import json
from typing import Any, Dict, Optional
from urllib.parse import quote_plus

import anyio
import httpx
from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError

from ..config import get_settings, load_credentials
from ..logger import log
from .exceptions import UpstreamDecodeError, UpstreamUnavailableError
from .models import GoogleSearchResponse, SearchResult, SearchToolArgs

TOOL_NAME = "google_search"
SEARCH_URL_TEMPLATE = "{endpoint}?key={key}&cx={cx}&q={query}"

MISSING_QUERY_MESSAGE = "query parameter is required"
MISSING_CREDENTIALS_MESSAGE = "environment variables GOOGLE_API_KEY and GOOGLE_CSE_ID must be set"


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def build_search_url(endpoint: str, api_key: str, cse_id: str, query: str) -> str:
    """
    Build the Custom Search request URL. Every interpolated value is
    form-encoded, so a space in the query travels as '+'.
    """
    return SEARCH_URL_TEMPLATE.format(
        endpoint=endpoint,
        key=quote_plus(api_key),
        cx=quote_plus(cse_id),
        query=quote_plus(query),
    )


class GoogleSearchTool:
    """
    Handler for the google_search tool.

    Caller mistakes, missing credentials and non-200 upstream answers come
    back as error results. Transport failures and undecodable bodies raise
    a GoogleSearchError so the protocol layer reports them as faults.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.client = client
        self.endpoint = endpoint or settings.GOOGLE_SEARCH_ENDPOINT
        self.timeout_seconds = timeout if timeout is not None else settings.SEARCH_TIMEOUT_SECONDS
        self.timeout = httpx.Timeout(self.timeout_seconds)

    async def __call__(self, arguments: Dict[str, Any]) -> CallToolResult:
        try:
            args = SearchToolArgs.model_validate(arguments)
        except ValidationError:
            return text_result(MISSING_QUERY_MESSAGE, is_error=True)

        credentials = load_credentials()
        if not credentials.complete:
            log.warning("Google credentials are not configured")
            return text_result(MISSING_CREDENTIALS_MESSAGE, is_error=True)

        log.info("Performing google search", extra={"query": args.query})

        url = build_search_url(
            self.endpoint,
            credentials.GOOGLE_API_KEY,
            credentials.GOOGLE_CSE_ID,
            args.query,
        )

        # httpx.Timeout bounds each phase; fail_after bounds the whole exchange
        try:
            with anyio.fail_after(self.timeout_seconds):
                async with self.client.stream("GET", url, timeout=self.timeout) as response:
                    if response.status_code != httpx.codes.OK:
                        status = f"{response.status_code} {response.reason_phrase}"
                        log.error("Google API returned non-200 status", extra={"status": status})
                        return text_result(f"Google Search API returned an error: {status}", is_error=True)
                    body = await response.aread()
        except httpx.TransportError as e:
            log.error(f"Failed to call google api: {e!r}")
            raise UpstreamUnavailableError(f"failed to call Google Search API: {e!r}") from e
        except TimeoutError as e:
            log.error(f"Google api call exceeded {self.timeout_seconds}s")
            raise UpstreamUnavailableError(
                f"failed to call Google Search API: no complete response within {self.timeout_seconds}s"
            ) from e

        try:
            decoded = GoogleSearchResponse.model_validate_json(body)
        except ValidationError as e:
            log.error(f"Failed to decode google api response: {e}")
            raise UpstreamDecodeError(f"failed to decode API response: {e}") from e

        results = [SearchResult(title=item.title, link=item.link) for item in decoded.items]
        payload = json.dumps([r.model_dump() for r in results], ensure_ascii=False, separators=(",", ":"))
        return text_result(payload)
