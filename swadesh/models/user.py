"""
Users. Created on first sign-in, never hard-deleted by the app.
"""

from typing import Optional

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from .base import TimestampedBase


class User(TimestampedBase):
    __tablename__ = "users"

    email: Mapped[Optional[str]] = mapped_column(String, unique=True, nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    profile_image_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    # Set once by POST /api/user/setup
    setup_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
