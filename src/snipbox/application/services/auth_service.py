"""Authentication workflows over one request's session.

Sequences credential checks, session token renewal and session values for
signup, login, logout, password change and identity-gated access.
"""

import logging
from uuid import UUID

from snipbox.application.exceptions import LoginRequiredError
from snipbox.application.forms import PasswordUpdateForm, UserLoginForm, UserSignupForm
from snipbox.application.routes import DEFAULT_LOGIN_REDIRECT, HOME_PATH, LOGIN_PATH
from snipbox.application.session import (
    AUTHENTICATED_USER_ID_KEY,
    FLASH_KEY,
    REDIRECT_KEY,
    Session,
    SessionManager,
)
from snipbox_identity.domain.user import EmailAlreadyExistsError, User, UserRepository
from snipbox_identity.exceptions import InvalidCredentialsError, WeakPasswordError

logger = logging.getLogger(__name__)

SIGNUP_FLASH = "Your signup was successful. Please log in."
LOGOUT_FLASH = "You've been logged out successfully!"
PASSWORD_UPDATED_FLASH = "Your password has been updated."

DUPLICATE_EMAIL_MESSAGE = "Email address is already in use"
INVALID_CREDENTIALS_MESSAGE = "Email or password is incorrect"
WRONG_CURRENT_PASSWORD_MESSAGE = "Current password is incorrect"


def _is_local_path(path: object) -> bool:
    return isinstance(path, str) and path.startswith("/") and not path.startswith("//")


class AuthenticationService:
    """Authentication workflows bound to one request's session.

    Every method that changes privilege renews the session token before
    touching the authenticated user id. Methods return the path the client
    should be redirected to.
    """

    def __init__(
        self,
        users: UserRepository,
        session: Session,
        session_manager: SessionManager,
    ):
        self._users = users
        self._session = session
        self._session_manager = session_manager
        self._resolved = False
        self._user_id: UUID | None = None

    async def signup(self, form: UserSignupForm) -> str:
        validator = form.validate()
        validator.raise_if_invalid(form.values())

        try:
            user = await self._users.insert(form.name, form.email, form.password)
        except EmailAlreadyExistsError:
            validator.add_field_error("email", DUPLICATE_EMAIL_MESSAGE)
            raise validator.error(form.values()) from None
        except WeakPasswordError as e:
            validator.add_field_error("password", e.message)
            raise validator.error(form.values()) from None

        logger.info("User signed up: %s", user.id)
        self._session.put(FLASH_KEY, SIGNUP_FLASH)
        return LOGIN_PATH

    async def login(self, form: UserLoginForm) -> str:
        """Authenticate and promote the session.

        Returns the pending redirect target, consumed once, or the default
        landing page.

        Raises
        ------
        ValidationFailedError
            If the form is invalid or the credentials do not match
        """
        validator = form.validate()
        validator.raise_if_invalid(form.values())

        try:
            user_id = await self._users.authenticate(form.email, form.password)
        except InvalidCredentialsError:
            validator.add_non_field_error(INVALID_CREDENTIALS_MESSAGE)
            raise validator.error(form.values()) from None

        await self._session_manager.renew_token(self._session)
        self._session.put(AUTHENTICATED_USER_ID_KEY, str(user_id))
        self._user_id, self._resolved = user_id, True
        logger.info("User logged in: %s", user_id)

        target = self._session.pop(REDIRECT_KEY)
        if _is_local_path(target):
            return target
        return DEFAULT_LOGIN_REDIRECT

    async def logout(self) -> str:
        """Drop the identity from the session. Valid for anonymous sessions too."""
        user_id = self._session.get(AUTHENTICATED_USER_ID_KEY)

        await self._session_manager.renew_token(self._session)
        self._session.remove(AUTHENTICATED_USER_ID_KEY)
        self._session.put(FLASH_KEY, LOGOUT_FLASH)
        self._user_id, self._resolved = None, True

        if user_id is not None:
            logger.info("User logged out: %s", user_id)
        return HOME_PATH

    async def change_password(self, user_id: UUID, form: PasswordUpdateForm) -> str:
        validator = form.validate()
        validator.raise_if_invalid(form.values())

        try:
            await self._users.update_password(
                user_id,
                form.current_password,
                form.new_password,
            )
        except InvalidCredentialsError:
            validator.add_field_error("currentPassword", WRONG_CURRENT_PASSWORD_MESSAGE)
            raise validator.error(form.values()) from None
        except WeakPasswordError as e:
            validator.add_field_error("newPassword", e.message)
            raise validator.error(form.values()) from None

        self._session.put(FLASH_KEY, PASSWORD_UPDATED_FLASH)
        return LOGIN_PATH

    async def current_user_id(self) -> UUID | None:
        """Return the authenticated user id, if the user still exists."""
        if self._resolved:
            return self._user_id

        self._resolved = True
        raw = self._session.get(AUTHENTICATED_USER_ID_KEY)
        if raw is None:
            return None

        try:
            user_id = UUID(str(raw))
        except ValueError:
            logger.warning("Discarding malformed user id in session")
            self._session.remove(AUTHENTICATED_USER_ID_KEY)
            return None

        if not await self._users.exists(user_id):
            return None

        self._user_id = user_id
        return user_id

    async def is_authenticated(self) -> bool:
        return await self.current_user_id() is not None

    async def require_user(self, requested_path: str) -> UUID:
        """Return the current user id or divert an anonymous session to login.

        Raises
        ------
        LoginRequiredError
            After recording ``requested_path`` as the post-login redirect
        """
        user_id = await self.current_user_id()
        if user_id is None:
            self._session.put(REDIRECT_KEY, requested_path)
            raise LoginRequiredError(requested_path)
        return user_id

    async def account(self, user_id: UUID) -> User:
        return await self._users.get(user_id)
