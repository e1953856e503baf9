"""Built-in validation rules for formgate forms.

Each validator is a callable with the signature::

    def rule(value) -> str | None:
        '''Return error message, or None if valid.'''

Parameterized validators are factory functions that return a validator::

    def max_length(n: int, label: str = "This field") -> Validator:
        def check(value) -> str | None:
            if value and len(value) > n:
                return f"{label} must be at most {n} characters"
            return None
        return check

Only ``required`` enforces presence. Every other rule lets an absent value
(``None`` or ``""``) through, so ``[required, email]`` reports "is required"
for an empty field and the format message for a bad one.

Cross-field factories (``date_before``, ``date_after``, ``password_match``)
capture the sibling value when the rule is built. Rebuild the rule list
whenever that value changes and hand it to ``FormValidation.set_rules``.

Custom validators follow the same protocol — any callable matching
``(value) -> str | None`` works with ``validate()`` and ``FormValidation``.
"""

import math
import re
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

# Type alias for a validator function
type Validator = Callable[[Any], str | None]


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


# Leading decimal literal of a string: "12abc" -> 12, "1_000" -> 1, "inf" -> none
_NUMBER_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def _to_number(value: Any, *, whole: bool = False) -> float | None:
    """Parse *value* as a float, or ``None`` when it is not a number.

    Strings are read by their leading numeric literal, so trailing junk is
    ignored unless *whole* is set. Integers too large for a float compare
    as infinity.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        found = _NUMBER_PREFIX_RE.match(value)
        if found is None:
            return None
        if whole and value[found.end() :].strip():
            return None
        return float(found.group(1))
    try:
        num = float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (ValueError, TypeError):
        return None
    if math.isnan(num):
        return None
    return num


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: Any, label: str = "This field") -> str | None:
    """Field must be present and non-empty.

    Empty collections (a multi-select with nothing picked) count as absent.
    Bind a label with ``functools.partial(required, label="Email")``.
    """
    if _is_absent(value):
        return f"{label} is required"
    if isinstance(value, list | tuple | set | frozenset | dict) and not value:
        return f"{label} is required"
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int, label: str = "This field") -> Validator:
    """String must be at most *n* characters."""

    def check(value: Any) -> str | None:
        if not value:
            return None
        if len(value) > n:
            return f"{label} must be at most {n} characters"
        return None

    return check


def min_length(n: int, label: str = "This field") -> Validator:
    """String must be at least *n* characters."""

    def check(value: Any) -> str | None:
        if not value:
            return None
        if len(value) < n:
            return f"{label} must be at least {n} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Numeric bounds
# ---------------------------------------------------------------------------


def min_value(n: float, label: str = "Value") -> Validator:
    """Number must be at least *n*.

    Values that do not parse as a number pass; pair with ``number`` to
    reject them.
    """

    def check(value: Any) -> str | None:
        num = _to_number(value)
        if num is None:
            return None
        if num < n:
            return f"{label} must be at least {n}"
        return None

    return check


def max_value(n: float, label: str = "Value") -> Validator:
    """Number must be at most *n*. Unparsable values pass."""

    def check(value: Any) -> str | None:
        num = _to_number(value)
        if num is None:
            return None
        if num > n:
            return f"{label} must be at most {n}"
        return None

    return check


def positive_number(label: str = "Amount") -> Validator:
    """Number must be greater than zero.

    Zero is a value, not an absence: ``0`` and ``"0"`` fail.
    """

    def check(value: Any) -> str | None:
        if _is_absent(value):
            return None
        num = _to_number(value)
        if num is None or num <= 0:
            return f"{label} must be greater than 0"
        return None

    return check


# ---------------------------------------------------------------------------
# Dates (ISO ``YYYY-MM-DD`` strings, compared lexically)
# ---------------------------------------------------------------------------


def _utc_today() -> str:
    return datetime.now(UTC).date().isoformat()


def date_not_in_past(
    label: str = "Date",
    *,
    today: Callable[[], str] | None = None,
) -> Validator:
    """Date must be today or later.

    ``today`` returns the current ISO date; it defaults to the UTC date.
    """
    clock = today or _utc_today

    def check(value: Any) -> str | None:
        if not value:
            return None
        if value < clock():
            return f"{label} cannot be in the past"
        return None

    return check


def date_before(
    other: str | None,
    label: str = "Start date",
    other_label: str = "end date",
) -> Validator:
    """Date must be on or before *other*. Passes while either side is empty."""

    def check(value: Any) -> str | None:
        if not value or not other:
            return None
        if value > other:
            return f"{label} must be before {other_label}"
        return None

    return check


def date_after(
    other: str | None,
    label: str = "End date",
    other_label: str = "start date",
) -> Validator:
    """Date must be on or after *other*. Passes while either side is empty."""

    def check(value: Any) -> str | None:
        if not value or not other:
            return None
        if value < other:
            return f"{label} must be after {other_label}"
        return None

    return check


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")


def password_strength(value: Any) -> str | None:
    """At least 8 characters with an uppercase, a lowercase and a digit.

    Checks run in that order and the first failure is reported.
    """
    if not value:
        return None
    if len(value) < 8:
        return "Password must be at least 8 characters"
    if not _UPPER_RE.search(value):
        return "Password must contain at least one uppercase letter"
    if not _LOWER_RE.search(value):
        return "Password must contain at least one lowercase letter"
    if not _DIGIT_RE.search(value):
        return "Password must contain at least one number"
    return None


def password_match(password: str | None) -> Validator:
    """Confirmation must equal *password* as it was when the rule was built."""

    def check(value: Any) -> str | None:
        if not value:
            return None
        if value != password:
            return "Passwords do not match"
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Basic email pattern — checks structure, not deliverability
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def email(value: Any) -> str | None:
    """Value must look like ``local@domain.tld``."""
    if not value:
        return None
    if not _EMAIL_RE.fullmatch(value):
        return "Please enter a valid email address"
    return None


# Optional leading +, then 7-15 ASCII digits, spaces or hyphens
_PHONE_RE = re.compile(r"\+?[0-9\s-]{7,15}")


def phone(value: Any) -> str | None:
    """Value must be a plausible phone number."""
    if not value:
        return None
    if not _PHONE_RE.fullmatch(value):
        return "Please enter a valid phone number"
    return None


def matches(pattern: str, message: str | None = None) -> Validator:
    """Value must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: Any) -> str | None:
        if not value:
            return None
        if not compiled.match(value):
            return message or f"Must match pattern: {pattern}"
        return None

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Validator:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: Any) -> str | None:
        if _is_absent(value):
            return None
        if value not in allowed:
            options = ", ".join(sorted(allowed))
            return f"Must be one of: {options}"
        return None

    return check


# ---------------------------------------------------------------------------
# Type coercion
# ---------------------------------------------------------------------------


def number(value: Any) -> str | None:
    """Value must be a valid number (int or float), with nothing trailing."""
    if _is_absent(value):
        return None
    if _to_number(value, whole=True) is None:
        return "Must be a number"
    return None
