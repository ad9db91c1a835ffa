from fastapi import APIRouter
from .info import router as info_router
from .mcp import router as mcp_router

router = APIRouter()
router.include_router(info_router)
router.include_router(mcp_router)
