"""SQLAlchemy model for the User aggregate and its credential."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from snipbox.infrastructure.persistence.sqlalchemy.models.base import CreatedAtMixin
from snipbox_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserModel(IdentityBase, CreatedAtMixin):
    """SQLAlchemy model for persisting users.

    The bcrypt hash lives on the same row but is never mapped onto the
    domain User.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
