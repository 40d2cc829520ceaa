"""SQLAlchemy base configuration."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from snipbox.domain.shared.time import utc_now


class Base(DeclarativeBase):
    """Base class for all database models."""


class CreatedAtMixin:
    """Mixin for an immutable created_at timestamp (utc_now)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        index=True,
    )
