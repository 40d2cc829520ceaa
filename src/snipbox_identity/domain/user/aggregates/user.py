"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from snipbox.domain.shared.time import utc_now
from snipbox_identity.domain.user.value_objects import Email


class User:
    """
    User aggregate root.

    Carries identity only. The password credential is owned by the
    repository and never appears on this object.
    """

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @classmethod
    def create(cls, name: str, email: Union[str, Email]) -> "User":
        return cls(name=name, email=email)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        created_at: datetime,
    ) -> "User":
        return cls(id=id, name=name, email=email, created_at=created_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
