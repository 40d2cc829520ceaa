"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from snipbox_identity.domain.user.aggregates import User


class UserRepository(ABC):
    """Repository interface for User aggregates and their credentials.

    Plaintext passwords go in, but only hashes are ever stored, and no
    method returns a hash.
    """

    @abstractmethod
    async def insert(self, name: str, email: str, password: str) -> User:
        """Create a user, hashing the password before it is stored.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already registered
        RepositoryFailureError
            If storage failed or the write did not affect exactly one row
        """

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> UUID:
        """Return the user id for matching credentials.

        Raises
        ------
        InvalidCredentialsError
            If the email is unknown or the password is wrong
        """

    @abstractmethod
    async def exists(self, user_id: UUID) -> bool:
        """Check if a user with the given id exists."""

    @abstractmethod
    async def get(self, user_id: UUID) -> User:
        """Return a user without credential data.

        Raises
        ------
        UserNotFoundError
            If no user has this id
        """

    @abstractmethod
    async def update_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        """Replace the credential after re-verifying the current password.

        Raises
        ------
        InvalidCredentialsError
            If the current password does not match
        """
