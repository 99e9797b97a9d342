"""
Persistence for users and memories.

Every memory read/update/delete loads the row by primary key and then
re-checks ownership. A row owned by someone else is reported exactly like a
missing row. Database failures surface as StorageUnavailable.
"""

import functools
import logging
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import StorageUnavailable
from ..models.memory import Memory, MemoryCategory
from ..models.user import User

logger = logging.getLogger(__name__)

# Profile fields refreshed on every sign-in
_MUTABLE_PROFILE_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


def _storage_errors(fn):
    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        try:
            return await fn(*args, **kwargs)
        except (SQLAlchemyError, OSError) as e:
            logger.error("Storage failure in %s: %s", fn.__name__, e)
            raise StorageUnavailable() from e
    return wrapper


def require_db(db: Optional[AsyncSession]) -> AsyncSession:
    if db is None:
        raise StorageUnavailable(
            "Database is not configured. Set DATABASE_URL to enable this feature."
        )
    return db


# ── Users ────────────────────────────────────────────────────────────

@_storage_errors
async def get_user(db: AsyncSession, user_id: str) -> Optional[User]:
    return await db.get(User, user_id)


@_storage_errors
async def upsert_user(db: AsyncSession, user_id: str, **profile: Any) -> User:
    """Insert the user if absent, else refresh the mutable profile fields."""
    user = await db.get(User, user_id)
    if user is None:
        user = User(id=user_id, **{k: profile.get(k) for k in _MUTABLE_PROFILE_FIELDS})
        db.add(user)
        logger.info("Created user %s", user_id)
    else:
        for key in _MUTABLE_PROFILE_FIELDS:
            if key in profile:
                setattr(user, key, profile[key])

    await db.commit()
    return user


@_storage_errors
async def complete_setup(db: AsyncSession, user_id: str) -> bool:
    """Mark onboarding done. Returns False if the user does not exist."""
    user = await db.get(User, user_id)
    if user is None:
        return False
    if not user.setup_completed:
        user.setup_completed = True
        await db.commit()
        logger.info("User %s completed setup", user_id)
    return True


# ── Memories ─────────────────────────────────────────────────────────

@_storage_errors
async def list_memories(db: AsyncSession, user_id: str) -> list[Memory]:
    """All memories owned by a user, in storage iteration order."""
    result = await db.execute(select(Memory).where(Memory.user_id == user_id))
    return list(result.scalars().all())


@_storage_errors
async def count_memories(db: AsyncSession, user_id: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(Memory).where(Memory.user_id == user_id)
    )
    return result.scalar_one()


async def _owned_memory(db: AsyncSession, memory_id: str, user_id: str) -> Optional[Memory]:
    memory = await db.get(Memory, memory_id)
    if memory is None or memory.user_id != user_id:
        return None
    return memory


@_storage_errors
async def get_memory(db: AsyncSession, memory_id: str, user_id: str) -> Optional[Memory]:
    return await _owned_memory(db, memory_id, user_id)


@_storage_errors
async def create_memory(
    db: AsyncSession,
    user_id: str,
    content: str,
    category: str = MemoryCategory.GENERAL.value,
    tags: str = "",
    is_pinned: bool = False,
) -> Memory:
    memory = Memory(
        user_id=user_id,
        content=content,
        category=MemoryCategory(category).value,
        tags=tags,
        is_pinned=is_pinned,
    )
    db.add(memory)
    await db.commit()
    logger.debug("Saved memory %s for user %s", memory.id, user_id)
    return memory


@_storage_errors
async def update_memory(
    db: AsyncSession,
    memory_id: str,
    user_id: str,
    content: Optional[str] = None,
    category: Optional[str] = None,
    tags: Optional[str] = None,
    is_pinned: Optional[bool] = None,
) -> Optional[Memory]:
    """Apply the given changes. Returns None when absent or not owned."""
    memory = await _owned_memory(db, memory_id, user_id)
    if memory is None:
        return None

    if content is not None:
        memory.content = content
    if category is not None:
        memory.category = MemoryCategory(category).value
    if tags is not None:
        memory.tags = tags
    if is_pinned is not None:
        memory.is_pinned = is_pinned

    await db.commit()
    return memory


@_storage_errors
async def delete_memory(db: AsyncSession, memory_id: str, user_id: str) -> bool:
    """Delete if owned. Returns False (and touches nothing) otherwise."""
    memory = await _owned_memory(db, memory_id, user_id)
    if memory is None:
        return False

    await db.delete(memory)
    await db.commit()
    logger.debug("Deleted memory %s for user %s", memory_id, user_id)
    return True
