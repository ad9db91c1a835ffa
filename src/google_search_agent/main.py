from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api import router as api_router
from .api.response.response import unexpect_error
from .config import APP_NAME, APP_VERSION, get_settings
from .logger import log
from .middleware import RequestLoggingMiddleware

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Clear LRU cache for settings at startup
    get_settings.cache_clear()
    settings = get_settings()
    log.info(f"Starting {APP_NAME} v{APP_VERSION}", extra={"upstream": settings.GOOGLE_SEARCH_ENDPOINT})
    log.info("MCP endpoint available at / (POST with JSON-RPC)")
    yield

app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


# Custom global error handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle all uncaught exceptions globally.
    """
    log.error(f"Unhandled exception: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=unexpect_error())
