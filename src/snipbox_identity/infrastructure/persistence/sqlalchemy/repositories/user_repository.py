"""SQLAlchemy implementation of UserRepository."""

import asyncio
import logging
from uuid import UUID

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from snipbox.domain.shared.exceptions import RepositoryFailureError
from snipbox.domain.shared.time import ensure_tz_aware
from snipbox.infrastructure.persistence.sqlalchemy.guard import (
    is_unique_violation,
    run_guarded,
)
from snipbox_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
)
from snipbox_identity.exceptions import InvalidCredentialsError, MalformedCredentialError
from snipbox_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from snipbox_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    bcrypt work runs in a worker thread so a slow hash does not stall the
    event loop. Mutations commit before returning.
    """

    def __init__(
        self,
        session: AsyncSession,
        password_service: PasswordHashingService,
        timeout: float | None = None,
    ) -> None:
        self._session = session
        self._password_service = password_service
        self._timeout = timeout

    async def insert(self, name: str, email: str, password: str) -> User:
        user = User.create(name=name, email=email)
        hashed = await asyncio.to_thread(self._password_service.hash, password)
        stmt = insert(UserModel).values(
            id=user.id,
            name=user.name,
            email=user.email,
            hashed_password=hashed,
            created_at=user.created_at,
        )

        async def _insert() -> None:
            try:
                result = await self._session.execute(stmt)
            except IntegrityError as e:
                await self._session.rollback()
                if is_unique_violation(e):
                    raise EmailAlreadyExistsError(user.email) from e
                raise
            if result.rowcount != 1:
                await self._session.rollback()
                raise RepositoryFailureError(
                    "users.insert",
                    f"expected 1 row, affected {result.rowcount}",
                )
            await self._session.commit()

        await run_guarded("users.insert", _insert(), self._timeout)
        logger.info("Created user: %s (email: %s)", user.id, user.email)
        return user

    async def authenticate(self, email: str, password: str) -> UUID:
        try:
            email_value = Email(email).value
        except InvalidEmailError:
            raise InvalidCredentialsError from None

        stmt = select(UserModel.id, UserModel.hashed_password).where(
            UserModel.email == email_value,
        )
        result = await run_guarded(
            "users.authenticate",
            self._session.execute(stmt),
            self._timeout,
        )
        row = result.one_or_none()
        if row is None:
            raise InvalidCredentialsError

        if not await self._verify(password, row.hashed_password, "users.authenticate"):
            raise InvalidCredentialsError

        return row.id

    async def exists(self, user_id: UUID) -> bool:
        stmt = select(UserModel.id).where(UserModel.id == user_id)
        result = await run_guarded(
            "users.exists",
            self._session.execute(stmt),
            self._timeout,
        )
        return result.scalar_one_or_none() is not None

    async def get(self, user_id: UUID) -> User:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await run_guarded(
            "users.get",
            self._session.execute(stmt),
            self._timeout,
        )
        model = result.scalar_one_or_none()

        if model is None:
            raise UserNotFoundError(str(user_id))

        return self._map_to_domain(model)

    async def update_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        stmt = select(UserModel.hashed_password).where(UserModel.id == user_id)
        result = await run_guarded(
            "users.update_password",
            self._session.execute(stmt),
            self._timeout,
        )
        old_hash = result.scalar_one_or_none()
        if old_hash is None:
            raise InvalidCredentialsError

        if not await self._verify(current_password, old_hash, "users.update_password"):
            raise InvalidCredentialsError

        new_hash = await asyncio.to_thread(self._password_service.hash, new_password)

        # Only swap if nobody changed the hash since we verified it
        swap = (
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.hashed_password == old_hash)
            .values(hashed_password=new_hash)
            .execution_options(synchronize_session=False)
        )

        async def _swap() -> None:
            result = await self._session.execute(swap)
            if result.rowcount == 0:
                await self._session.rollback()
                raise InvalidCredentialsError
            if result.rowcount != 1:
                await self._session.rollback()
                raise RepositoryFailureError(
                    "users.update_password",
                    f"expected 1 row, affected {result.rowcount}",
                )
            await self._session.commit()

        await run_guarded("users.update_password", _swap(), self._timeout)
        logger.info("Password changed for user: %s", user_id)

    async def _verify(self, password: str, password_hash: str, operation: str) -> bool:
        try:
            return await asyncio.to_thread(
                self._password_service.verify,
                password,
                password_hash,
            )
        except MalformedCredentialError as e:
            logger.error("Stored credential is malformed (%s)", operation)
            raise RepositoryFailureError(operation, "malformed credential") from e

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            created_at=ensure_tz_aware(model.created_at),
        )
