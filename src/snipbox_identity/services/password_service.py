"""Credential store: bcrypt hashing and verification.

Plaintext passwords stop here. Everything past this module only ever sees
the encoded bcrypt hash.
"""

import bcrypt

from snipbox_identity.exceptions import MalformedCredentialError, WeakPasswordError

# bcrypt silently ignores input past 72 bytes, so longer passwords are refused
BCRYPT_MAX_BYTES = 72


class PasswordHashingService:
    """Salted, adaptive password hashing.

    Each ``hash`` call draws a new salt, so hashing the same password twice
    yields two different credentials. Never compare hashes for equality;
    use ``verify``.

    Examples
    --------
    >>> credentials = PasswordHashingService(rounds=4)
    >>> stored = credentials.hash("pa$$word-123")
    >>> credentials.verify("pa$$word-123", stored)
    True
    >>> credentials.verify("something-else", stored)
    False
    """

    MAX_BYTES = BCRYPT_MAX_BYTES

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor; each increment doubles the work. Production
            uses 12, tests drop to the minimum of 4.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt credential for ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is empty or longer than 72 bytes once encoded
        """
        self.validate_hashable(password)
        credential = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return credential.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored credential.

        A mismatch is ``False``; a credential bcrypt cannot parse is an
        error, since it points at corrupt storage rather than a bad guess.

        Raises
        ------
        MalformedCredentialError
            If ``password_hash`` is not a bcrypt credential
        """
        candidate = password.encode("utf-8")
        if len(candidate) > self.MAX_BYTES:
            # hash() refuses these, so no stored credential can match
            return False

        try:
            return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
        except (ValueError, TypeError) as e:
            raise MalformedCredentialError from e

    def validate_hashable(self, password: str) -> None:
        if not password:
            raise WeakPasswordError("Password cannot be empty")

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            raise WeakPasswordError(f"Password cannot exceed {self.MAX_BYTES} bytes")

    def needs_rehash(self, password_hash: str) -> bool:
        """Whether a credential was made with a different cost factor.

        Unparseable credentials always need rehashing.
        """
        # Layout: $2b$<cost>$<salt+digest>
        parts = password_hash.split("$")
        if len(parts) < 4 or not parts[2].isdigit():
            return True
        return int(parts[2]) != self._rounds
