from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..config import APP_NAME, APP_VERSION

router = APIRouter(tags=["info"])

@router.get("/health")
async def health():
    return JSONResponse(content={"status": "ok"})

@router.get("/version")
async def version():
    return JSONResponse(content={"name": APP_NAME, "version": APP_VERSION})
