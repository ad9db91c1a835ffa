import time

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .logger import log

SESSION_HEADER = "mcp-session-id"
SESSION_SUFFIX_LEN = 6

# A response that never announces its status is a plain 200.
DEFAULT_STATUS = 200


def short_id(session_id: str) -> str:
    """Last characters of a session id, enough to correlate log lines."""
    return session_id[-SESSION_SUFFIX_LEN:]


class RequestLoggingMiddleware:
    """
    Log one line per HTTP request: method, path, client address, session
    suffix (when present), final status and duration.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code = DEFAULT_STATUS

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            status_code = 500
            raise
        finally:
            self._log(scope, status_code, time.perf_counter() - start)

    def _log(self, scope: Scope, status_code: int, elapsed: float) -> None:
        client = scope.get("client")
        remote_addr = f"{client[0]}:{client[1]}" if client else "-"
        extra = {
            "method": scope["method"],
            "path": scope["path"],
            "remote_addr": remote_addr,
            "status": status_code,
            "duration_ms": round(elapsed * 1000, 2),
        }
        session_id = Headers(scope=scope).get(SESSION_HEADER)
        if session_id:
            extra["session"] = f"...{short_id(session_id)}"
        log.info("request", extra=extra)
