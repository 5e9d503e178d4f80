# File: dscvit/models/paste.py

"""
Paste model.

Only the table shape lives here so `pastes.belongs_to` can join against
`users.id`; paste storage and rendering are handled elsewhere.
"""

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dscvit.models.base import Base


class Paste(Base):
    __tablename__ = "pastes"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    belongs_to: Mapped[str | None] = mapped_column(
        String, ForeignKey("users.id"), nullable=True, index=True
    )
    is_url: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
