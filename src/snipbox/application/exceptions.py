"""Application-level exceptions."""

from snipbox.application.routes import LOGIN_PATH


class LoginRequiredError(Exception):  # NOQA: N818
    """Raised when an anonymous session requests an identity-gated resource.

    The requested path has already been stored in the session as the
    post-login redirect target when this is raised.
    """

    def __init__(self, requested_path: str, login_path: str = LOGIN_PATH) -> None:
        self.requested_path = requested_path
        self.login_path = login_path
        super().__init__(f"Login required for {requested_path}")
