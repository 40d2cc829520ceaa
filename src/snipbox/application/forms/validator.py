"""Field rule checks collected into a single validation result.

Rules are independent: every failing rule is recorded, so callers can show
all problems at once. A form is inspected once, after all rules ran.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from snipbox.domain.shared.exceptions import ValidationFailedError


@dataclass
class FormValidator:
    """Accumulates field and non-field errors for one submitted form."""

    field_errors: dict[str, list[str]] = field(default_factory=dict)
    non_field_errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.field_errors and not self.non_field_errors

    def add_field_error(self, key: str, message: str) -> None:
        messages = self.field_errors.setdefault(key, [])
        if message not in messages:
            messages.append(message)

    def add_non_field_error(self, message: str) -> None:
        self.non_field_errors.append(message)

    def check_field(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_field_error(key, message)

    def error(self, values: dict[str, Any] | None = None) -> ValidationFailedError:
        return ValidationFailedError(
            field_errors=self.field_errors,
            non_field_errors=self.non_field_errors,
            values=values,
        )

    def raise_if_invalid(self, values: dict[str, Any] | None = None) -> None:
        if not self.valid:
            raise self.error(values)


def not_blank(value: str) -> bool:
    return value.strip() != ""


def max_chars(value: str, n: int) -> bool:
    return len(value) <= n


def min_chars(value: str, n: int) -> bool:
    return len(value) >= n


def matches(value: str, pattern: re.Pattern[str]) -> bool:
    return pattern.match(value) is not None


def permitted_value(value: Any, *permitted: Any) -> bool:
    return value in permitted
