"""
FastAPI dependencies. Injected into route handlers.
"""

from functools import partial
from typing import AsyncIterator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_db as _get_db
from .errors import StorageUnavailable, Unauthorized
from .session import Anonymous, Authenticated, SessionIdentity, resolve_identity
from ..services.storage import get_user


async def get_optional_db() -> AsyncIterator[Optional[AsyncSession]]:
    """Yields an async DB session per request, or None when persistence is off."""
    async for session in _get_db():
        yield session


async def get_identity(
    request: Request,
    db: Optional[AsyncSession] = Depends(get_optional_db),
) -> SessionIdentity:
    """Resolve Authenticated / Guest / Anonymous for this request."""
    find_user = partial(get_user, db) if db is not None else None
    return await resolve_identity(request, find_user)


async def require_user(
    identity: SessionIdentity = Depends(get_identity),
) -> Authenticated:
    """Same as get_identity, but only Authenticated passes."""
    if isinstance(identity, Anonymous) and identity.lookup_failed:
        raise StorageUnavailable()
    if not isinstance(identity, Authenticated):
        raise Unauthorized()
    return identity
