"""Deadline and error classification for storage calls.

Every awaitable that touches the database goes through ``run_guarded`` so
that timeouts and driver errors reach callers as RepositoryFailureError
and never as "not found" or "invalid credentials".
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from snipbox.domain.shared.exceptions import RepositoryFailureError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


async def run_guarded(
    operation: str,
    awaitable: Awaitable[T],
    timeout: float | None,
) -> T:
    """Await ``awaitable`` within ``timeout`` seconds.

    Domain exceptions raised inside pass through untouched. Cancellation of
    the calling task cancels the awaitable as well.

    Raises
    ------
    RepositoryFailureError
        On timeout or any SQLAlchemy error
    """
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError as e:
        logger.warning("Storage operation %s timed out after %ss", operation, timeout)
        raise RepositoryFailureError(operation, "timed out") from e
    except SQLAlchemyError as e:
        logger.error("Storage operation %s failed: %s", operation, e)
        raise RepositoryFailureError(operation) from e


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell a unique-constraint violation apart from other integrity errors."""
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code is not None:
        return code == UNIQUE_VIOLATION
    text = str(orig).lower()
    return "unique constraint failed" in text or "unique" in text
