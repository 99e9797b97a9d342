"""
Chat API — the only endpoints that read stored memories.

POST /api/chat        — Structured, longer answers
POST /api/voice-chat  — Short spoken-style answers

Flow: identity → memory context (best-effort) → compose → generate.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import get_identity, get_optional_db
from ..core.errors import StorageUnavailable
from ..core.session import SessionIdentity
from ..schemas import ChatRequest, ChatResponse
from ..services import llm, storage
from ..services.memory import assemble_context
from ..services.prompts import ResponseMode, compose

logger = logging.getLogger(__name__)

chat_router = APIRouter(tags=["chat"])


async def _context_for(
    identity: SessionIdentity,
    explicit_context: Optional[str],
    db: Optional[AsyncSession],
) -> Optional[str]:
    """Personalization is best-effort: storage trouble means no memories, not a failed chat."""

    async def load_memories(user_id: str):
        return await storage.list_memories(storage.require_db(db), user_id)

    try:
        return await assemble_context(identity, explicit_context, load_memories)
    except StorageUnavailable as e:
        logger.warning("Memory context unavailable, continuing without it: %s", e)
        return explicit_context


async def _reply(
    request: ChatRequest,
    mode: ResponseMode,
    identity: SessionIdentity,
    db: Optional[AsyncSession],
) -> ChatResponse:
    context = await _context_for(identity, request.context, db)
    prompt = compose(request.message, request.personality, context, mode)
    response = await llm.generate(prompt.system_instruction, prompt.content)
    return ChatResponse(response=response)


@chat_router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    identity: SessionIdentity = Depends(get_identity),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    """Send a message to Swadesh AI."""
    return await _reply(request, ResponseMode.CHAT, identity, db)


@chat_router.post("/voice-chat", response_model=ChatResponse)
async def voice_chat(
    request: ChatRequest,
    identity: SessionIdentity = Depends(get_identity),
    db: Optional[AsyncSession] = Depends(get_optional_db),
):
    """Same as /chat with the spoken-length response policy."""
    return await _reply(request, ResponseMode.VOICE, identity, db)
