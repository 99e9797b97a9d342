"""
Main API router. Mounts all sub-routers under /api.
"""

from fastapi import APIRouter

from .auth import auth_router
from .chat import chat_router
from .health import health_router
from .memories import memories_router
from .tools import tools_router

router = APIRouter(prefix="/api")

# Identity is resolved per route: chat and tools accept guests,
# memories and profile require a signed-in user.
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(memories_router)
router.include_router(chat_router)
router.include_router(tools_router)
