from typing import Any, Optional, Union

from mcp.types import INTERNAL_ERROR, ErrorData, RequestId
from pydantic import BaseModel

JSONRPC_VERSION = "2.0"


def dump(model: BaseModel) -> dict:
    return model.model_dump(by_alias=True, exclude_none=True, mode="json")


def ok(request_id: RequestId, result: Union[BaseModel, dict, None] = None):
    if isinstance(result, BaseModel):
        result = dump(result)
    return dict(
        jsonrpc=JSONRPC_VERSION,
        id=request_id,
        result=result or dict(),
    )


def error(request_id: Optional[RequestId], code: int, message: str = "error", data: Any = None):
    return dict(
        jsonrpc=JSONRPC_VERSION,
        id=request_id,
        error=dump(ErrorData(code=code, message=message, data=data)),
    )

def unexpect_error(request_id: Optional[RequestId] = None):
    return error(
        request_id,
        code=INTERNAL_ERROR,
        message="An unexpected error occurred.",
    )
