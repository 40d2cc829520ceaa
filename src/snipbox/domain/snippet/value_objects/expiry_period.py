"""Expiry period value object."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from snipbox.domain.snippet.exceptions import InvalidExpiryError

ALLOWED_EXPIRY_DAYS: tuple[int, ...] = (1, 7, 365)
DEFAULT_EXPIRY_DAYS = 365


@dataclass(frozen=True)
class ExpiryPeriod:
    """Whole number of days a snippet stays visible."""

    days: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not pass as 1 day
        if isinstance(self.days, bool) or self.days not in ALLOWED_EXPIRY_DAYS:
            raise InvalidExpiryError(self.days, ALLOWED_EXPIRY_DAYS)

    def expires_at(self, created_at: datetime) -> datetime:
        return created_at + timedelta(days=self.days)

    def __str__(self) -> str:
        return f"{self.days}d"
