"""
All database models. Imported here so Base.metadata sees them for create_all().
"""

from .base import TimestampedBase
from .user import User
from .memory import Memory, MemoryCategory

__all__ = [
    "TimestampedBase",
    "User",
    "Memory", "MemoryCategory",
]
