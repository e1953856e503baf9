"""Validation result — immutable outcome of a full-record check."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a record against a rule set.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validate(record, rules)
        if not result:
            return render_form(record, errors=result.errors)

    ``data`` holds the values of the fields that passed, after any
    whitespace stripping.

    ``errors`` maps each failing field to the message of the first rule
    that rejected it::

        {"email": "Email is required",
         "end_date": "End date must be after start date"}
    """

    data: dict[str, Any]
    errors: dict[str, str]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
