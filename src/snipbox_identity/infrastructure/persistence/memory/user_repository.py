"""In-memory implementation of UserRepository."""

from dataclasses import dataclass
from uuid import UUID

from snipbox_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
)
from snipbox_identity.exceptions import InvalidCredentialsError
from snipbox_identity.services import PasswordHashingService


@dataclass
class _StoredUser:
    user: User
    hashed_password: str


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed user storage enforcing unique emails."""

    def __init__(self, password_service: PasswordHashingService) -> None:
        self._password_service = password_service
        self._by_id: dict[UUID, _StoredUser] = {}
        self._ids_by_email: dict[str, UUID] = {}

    async def insert(self, name: str, email: str, password: str) -> User:
        user = User.create(name=name, email=email)
        if user.email in self._ids_by_email:
            raise EmailAlreadyExistsError(user.email)

        hashed = self._password_service.hash(password)
        self._by_id[user.id] = _StoredUser(user=user, hashed_password=hashed)
        self._ids_by_email[user.email] = user.id
        return user

    async def authenticate(self, email: str, password: str) -> UUID:
        try:
            user_id = self._ids_by_email.get(Email(email).value)
        except InvalidEmailError:
            raise InvalidCredentialsError from None

        if user_id is None:
            raise InvalidCredentialsError

        stored = self._by_id[user_id]
        if not self._password_service.verify(password, stored.hashed_password):
            raise InvalidCredentialsError
        return user_id

    async def exists(self, user_id: UUID) -> bool:
        return user_id in self._by_id

    async def get(self, user_id: UUID) -> User:
        stored = self._by_id.get(user_id)
        if stored is None:
            raise UserNotFoundError(str(user_id))
        return stored.user

    async def update_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        stored = self._by_id.get(user_id)
        if stored is None:
            raise InvalidCredentialsError
        if not self._password_service.verify(current_password, stored.hashed_password):
            raise InvalidCredentialsError
        stored.hashed_password = self._password_service.hash(new_password)

    def __len__(self) -> int:
        return len(self._by_id)
