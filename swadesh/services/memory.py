"""
Cross-session user memory — turn stored memories into a prompt context block.

Used by the chat and voice-chat endpoints to personalize every request.
Only Authenticated identities are ever looked up: guests have no user row.
"""

import logging
from typing import Awaitable, Callable, Iterable, Optional

from ..core.session import Authenticated, SessionIdentity

logger = logging.getLogger(__name__)

MEMORY_CONTEXT_HEADER = "User's memories for context:"

# Loads all memories for a user id. May raise StorageUnavailable.
MemoryLoader = Callable[[str], Awaitable[Iterable]]


def format_memories_for_prompt(memories: Iterable) -> str:
    """Render memories as a context block. Empty string when there are none."""
    lines = [f"- {m.content}" for m in memories]
    if not lines:
        return ""
    return MEMORY_CONTEXT_HEADER + "\n" + "\n".join(lines)


async def assemble_context(
    identity: SessionIdentity,
    explicit_context: Optional[str],
    load_memories: MemoryLoader,
) -> Optional[str]:
    """
    Merge the caller's stored memories with caller-supplied context.

    Memories come first, then a blank line, then the explicit context; either
    half is dropped when empty. With no memories the explicit context is
    returned unchanged.

    Memory order is whatever storage returns. Pinned memories get no priority.
    """
    if not isinstance(identity, Authenticated):
        return explicit_context

    memories = await load_memories(identity.user_id)
    memories_context = format_memories_for_prompt(memories)
    if not memories_context:
        return explicit_context

    if explicit_context:
        return f"{memories_context}\n\n{explicit_context}"
    return memories_context
