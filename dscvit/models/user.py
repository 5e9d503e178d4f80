# File: dscvit/models/user.py

"""
User model.

A row with only `id` set is an anonymous, session-only user; filling in the
profile fields later promotes it in place. `id` is the session identifier and
never changes.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from dscvit.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    username: Mapped[str | None] = mapped_column(String, nullable=True)
    # Opaque credential material, stored exactly as given
    password: Mapped[str | None] = mapped_column(String, nullable=True)
    activated: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r}, activated={self.activated!r})"
