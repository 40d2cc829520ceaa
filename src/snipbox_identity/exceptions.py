"""Identity and authentication exceptions.

These exceptions are raised by the snipbox_identity package and should be
caught and handled by the application layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class WeakPasswordError(AuthError):
    """Raised when a password cannot be hashed safely."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect.

    Deliberately ambiguous: an unknown email and a wrong password raise the
    same error with the same message.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class MalformedCredentialError(AuthError):
    """Raised when a stored password hash cannot be parsed."""

    def __init__(self, message: str = "Stored credential is malformed"):
        super().__init__(message)
