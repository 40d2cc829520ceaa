"""SQLAlchemy model for server-side HTTP sessions."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from snipbox.infrastructure.persistence.sqlalchemy.models.base import Base


class SessionModel(Base):
    """One row per live browser session, keyed by its opaque token."""

    __tablename__ = "sessions"

    token: Mapped[str] = mapped_column(String(64), primary_key=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    expiry: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<SessionModel(expiry={self.expiry})>"
