"""
Sign-in, sign-out and profile endpoints.

GET  /api/login         — Development sign-in bypass (FF_ENABLE_DEV_LOGIN)
GET  /api/logout        — Clear the session, redirect home
GET  /api/auth/logout   — Clear the session, JSON
GET  /api/auth/user     — Current user
GET  /api/auth/profile  — Current user + memory count
POST /api/user/setup    — Mark onboarding complete
POST /api/user/settings — Validate a settings document, fill in defaults
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import get_optional_db, require_user
from ..core.errors import NotFound
from ..core.flags import dev_login_enabled
from ..core.session import SESSION_USER_KEY, Authenticated
from ..schemas import ProfileOut, SuccessResponse, UserOut, UserSettings
from ..services import storage

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["auth"])

DEV_USER_ID = "dev-user-001"
DEV_USER_PROFILE = {
    "email": "dev@swadesh.ai",
    "first_name": "Dev",
    "last_name": "User",
    "profile_image_url": None,
}


# ── Session ──────────────────────────────────────────────────────────

@auth_router.get("/login")
async def login(
    request: Request,
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    """Sign in as the fixed development user."""
    if not dev_login_enabled():
        raise NotFound()

    db = storage.require_db(db)
    user = await storage.upsert_user(db, DEV_USER_ID, **DEV_USER_PROFILE)
    request.session[SESSION_USER_KEY] = user.id
    logger.info("Dev sign-in: user=%s", user.id)
    return RedirectResponse(url="/", status_code=302)


@auth_router.get("/logout")
async def logout(request: Request):
    request.session.clear()
    return RedirectResponse(url="/", status_code=302)


@auth_router.get("/auth/logout", response_model=SuccessResponse)
async def logout_json(request: Request):
    request.session.clear()
    return SuccessResponse()


# ── Profile ──────────────────────────────────────────────────────────

@auth_router.get("/auth/user", response_model=UserOut)
async def current_user(
    identity: Authenticated = Depends(require_user),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    user = await storage.get_user(storage.require_db(db), identity.user_id)
    if user is None:
        raise NotFound("User not found")
    return UserOut.model_validate(user)


@auth_router.get("/auth/profile", response_model=ProfileOut)
async def profile(
    identity: Authenticated = Depends(require_user),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    db = storage.require_db(db)
    user = await storage.get_user(db, identity.user_id)
    if user is None:
        raise NotFound("User not found")
    count = await storage.count_memories(db, identity.user_id)
    return ProfileOut(user=UserOut.model_validate(user), memories_count=count)


@auth_router.post("/user/setup", response_model=SuccessResponse)
async def complete_setup(
    identity: Authenticated = Depends(require_user),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    """Mark first-run onboarding as done. Idempotent."""
    if not await storage.complete_setup(storage.require_db(db), identity.user_id):
        raise NotFound("User not found")
    return SuccessResponse()


@auth_router.post("/user/settings", response_model=UserSettings)
async def validate_settings(request: UserSettings):
    """Settings live on the client. The server only checks bounds and fills defaults."""
    return request
