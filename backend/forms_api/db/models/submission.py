"""
Submission model — one row per accepted employee form submission.

Columns mirror the fields of the employee form.  Multi-select values
are kept as an ordered JSON list; the switch field as a boolean.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from forms_api.db.models.base import Base, generate_uuid, utcnow


class Submission(Base):
    __tablename__ = "submissions"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    submission_id: Mapped[str] = mapped_column(
        String(36), unique=True, nullable=False, index=True, default=generate_uuid
    )

    # Form fields
    full_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    skills: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    join_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<Submission {self.submission_id} {self.full_name!r} created={self.created_at}>"
