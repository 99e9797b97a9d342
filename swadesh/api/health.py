"""
Health check. No identity, no I/O: reports configured capabilities only.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter

from ..core import database
from ..core.config import get_settings
from ..schemas import HealthOut
from ..services import llm

health_router = APIRouter(tags=["health"])

_started_at = time.monotonic()


@health_router.get("/health", response_model=HealthOut)
async def health():
    settings = get_settings()
    return HealthOut(
        status="ok",
        app=settings.app_name,
        version=settings.app_version,
        uptime=int(time.monotonic() - _started_at),
        db=database.is_configured(),
        ai=llm.is_configured(),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
