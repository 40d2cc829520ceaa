"""Identity services."""

from snipbox_identity.services.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]
