"""SQLAlchemy declarative base for snipbox_identity models.

Shares snipbox's metadata so ``create_all`` builds every table at once.
"""

from snipbox.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
