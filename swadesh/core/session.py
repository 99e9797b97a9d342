"""
Session identity — exactly one of Authenticated / Guest / Anonymous per request.

Transport details (signed cookie session, client-declared guest header) stop
here. Handlers receive a SessionIdentity as an explicit parameter and never
read session state themselves.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from .flags import get_flags

logger = logging.getLogger(__name__)

GUEST_HEADER = "x-guest-mode"
SESSION_USER_KEY = "user_id"


@dataclass(frozen=True)
class Authenticated:
    user_id: str


@dataclass(frozen=True)
class Guest:
    """Client-declared, unpersisted identity. Has no user row and owns no memories."""


@dataclass(frozen=True)
class Anonymous:
    """No usable credential. `lookup_failed` marks a session whose user could not be checked."""
    lookup_failed: bool = False


SessionIdentity = Union[Authenticated, Guest, Anonymous]

# Returns the user row (or None) for an id. None when persistence is not configured.
UserFinder = Callable[[str], Awaitable[Optional[Any]]]


def is_guest_request(headers) -> bool:
    return headers.get(GUEST_HEADER, "").strip().lower() in {"1", "true", "yes"}


async def resolve_identity(request, find_user: Optional[UserFinder]) -> SessionIdentity:
    """
    Resolve the caller. Never raises — missing or bad credentials give Anonymous.

    The guest signal is checked first and never touches storage. A session
    user id only counts if the user row still exists.
    """
    if get_flags().enable_guest_mode and is_guest_request(request.headers):
        return Guest()

    session = request.scope.get("session") or {}
    user_id = session.get(SESSION_USER_KEY)
    if not user_id:
        return Anonymous()

    if find_user is None:
        logger.debug("Session user %s ignored: persistence not configured", user_id)
        return Anonymous()

    try:
        user = await find_user(user_id)
    except Exception as e:
        logger.warning("Identity lookup failed for session user %s: %s", user_id, e)
        return Anonymous(lookup_failed=True)

    if user is None:
        logger.info("Session references missing user %s — treating as anonymous", user_id)
        return Anonymous()

    return Authenticated(user_id=user_id)
