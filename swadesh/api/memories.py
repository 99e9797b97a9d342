"""
Memories API. Every route requires a signed-in user.

GET    /api/memories       — List the caller's memories
POST   /api/memories       — Create a memory
PATCH  /api/memories/{id}  — Edit a memory
DELETE /api/memories/{id}  — Delete a memory

Someone else's memory id answers 404, never 403.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import get_optional_db, require_user
from ..core.errors import NotFound
from ..core.session import Authenticated
from ..schemas import MemoryCreate, MemoryOut, MemoryUpdate, SuccessResponse
from ..services import storage

logger = logging.getLogger(__name__)

memories_router = APIRouter(prefix="/memories", tags=["memories"])


@memories_router.get("", response_model=list[MemoryOut])
async def list_memories(
    identity: Authenticated = Depends(require_user),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    memories = await storage.list_memories(storage.require_db(db), identity.user_id)
    return [MemoryOut.model_validate(m) for m in memories]


@memories_router.post("", response_model=MemoryOut)
async def create_memory(
    request: MemoryCreate,
    identity: Authenticated = Depends(require_user),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    memory = await storage.create_memory(
        storage.require_db(db),
        identity.user_id,
        content=request.content,
        category=request.category.value,
        tags=request.tags,
        is_pinned=request.is_pinned,
    )
    return MemoryOut.model_validate(memory)


@memories_router.patch("/{memory_id}", response_model=MemoryOut)
async def update_memory(
    memory_id: str,
    request: MemoryUpdate,
    identity: Authenticated = Depends(require_user),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    memory = await storage.update_memory(
        storage.require_db(db),
        memory_id,
        identity.user_id,
        content=request.content,
        category=request.category.value if request.category else None,
        tags=request.tags,
        is_pinned=request.is_pinned,
    )
    if memory is None:
        raise NotFound("Memory not found")
    return MemoryOut.model_validate(memory)


@memories_router.delete("/{memory_id}", response_model=SuccessResponse)
async def delete_memory(
    memory_id: str,
    identity: Authenticated = Depends(require_user),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    deleted = await storage.delete_memory(storage.require_db(db), memory_id, identity.user_id)
    if not deleted:
        raise NotFound("Memory not found")
    return SuccessResponse()
