import json
import uuid
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from mcp.shared.exceptions import McpError
from mcp.shared.version import SUPPORTED_PROTOCOL_VERSIONS
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    LATEST_PROTOCOL_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    CallToolRequestParams,
    ErrorData,
    Implementation,
    InitializeResult,
    JSONRPCNotification,
    JSONRPCRequest,
    ListToolsResult,
    ServerCapabilities,
    ToolsCapability,
)
from pydantic import BaseModel, ValidationError

from ..config import APP_NAME, APP_VERSION
from ..dependencies import get_registry
from ..logger import log
from ..tools import ToolRegistry
from ..tools.exceptions import UnknownToolError
from .response.response import error, ok

SESSION_HEADER = "Mcp-Session-Id"

router = APIRouter(tags=["mcp"])

MethodHandler = Callable[[Optional[Dict[str, Any]], ToolRegistry], Awaitable[BaseModel | dict]]


async def initialize(params: Optional[Dict[str, Any]], registry: ToolRegistry) -> InitializeResult:
    requested = (params or {}).get("protocolVersion")
    protocol_version = requested if requested in SUPPORTED_PROTOCOL_VERSIONS else LATEST_PROTOCOL_VERSION
    return InitializeResult(
        protocolVersion=protocol_version,
        capabilities=ServerCapabilities(tools=ToolsCapability(listChanged=False)),
        serverInfo=Implementation(name=APP_NAME, version=APP_VERSION),
    )


async def ping(params: Optional[Dict[str, Any]], registry: ToolRegistry) -> dict:
    return {}


async def list_tools(params: Optional[Dict[str, Any]], registry: ToolRegistry) -> ListToolsResult:
    return ListToolsResult(tools=registry.list_tools())


async def call_tool(params: Optional[Dict[str, Any]], registry: ToolRegistry) -> BaseModel:
    try:
        call = CallToolRequestParams.model_validate(params or {})
    except ValidationError as e:
        raise McpError(ErrorData(code=INVALID_PARAMS, message=f"Invalid tools/call params: {e}"))

    try:
        return await registry.call(call.name, call.arguments)
    except UnknownToolError as e:
        raise McpError(ErrorData(code=INVALID_PARAMS, message=str(e)))
    except Exception as e:
        log.error(f"Tool {call.name} failed: {e}", exc_info=True)
        raise McpError(ErrorData(code=INTERNAL_ERROR, message=str(e)))


METHODS: Dict[str, MethodHandler] = {
    "initialize": initialize,
    "ping": ping,
    "tools/list": list_tools,
    "tools/call": call_tool,
}


@router.post("/")
async def handle_message(request: Request, registry: ToolRegistry = Depends(get_registry)) -> Response:
    """
    JSON-RPC entry point for the Model Context Protocol.

    Notifications are acknowledged with 202. Requests are answered with a
    JSON-RPC response; tool failures the caller should read come back as a
    result with isError set, everything else as an error envelope.
    """
    try:
        body = json.loads(await request.body())
    except (ValueError, UnicodeDecodeError):
        return JSONResponse(status_code=400, content=error(None, PARSE_ERROR, "Parse error"))

    if isinstance(body, dict) and "id" not in body:
        try:
            notification = JSONRPCNotification.model_validate(body)
        except ValidationError:
            return JSONResponse(status_code=400, content=error(None, INVALID_REQUEST, "Invalid request"))
        log.debug(f"Received notification {notification.method}")
        return Response(status_code=202)

    try:
        message = JSONRPCRequest.model_validate(body)
    except ValidationError:
        return JSONResponse(status_code=400, content=error(None, INVALID_REQUEST, "Invalid request"))

    handler = METHODS.get(message.method)
    if handler is None:
        return JSONResponse(content=error(message.id, METHOD_NOT_FOUND, f"Method not found: {message.method}"))

    try:
        result = await handler(message.params, registry)
    except McpError as e:
        return JSONResponse(content=error(message.id, e.error.code, e.error.message, e.error.data))

    headers = None
    if message.method == "initialize":
        headers = {SESSION_HEADER: uuid.uuid4().hex}
    return JSONResponse(content=ok(message.id, result), headers=headers)
