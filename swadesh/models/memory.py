"""
User memory persistence.

Short user-authored facts used to personalize chat.
Categories: general, personal, work, health, learning
"""

from enum import Enum

from sqlalchemy import String, Text, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from .base import TimestampedBase


class MemoryCategory(str, Enum):
    GENERAL = "general"
    PERSONAL = "personal"
    WORK = "work"
    HEALTH = "health"
    LEARNING = "learning"


class Memory(TimestampedBase):
    __tablename__ = "memories"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(
        String, nullable=False, default=MemoryCategory.GENERAL.value
    )
    tags: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_pinned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
