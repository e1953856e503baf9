"""formgate — declarative field validation for interactive forms.

Composable rules, lazy error display, one authoritative submission gate.

Interactive usage::

    from functools import partial
    from formgate import FormValidation, email, required

    form = FormValidation({"email": [partial(required, label="Email"), email]})
    form.on_blur("email", "")
    form.get_field_error("email")   # "Email is required"
    form.validate_all({"email": "a@b.com"})   # True

Stateless usage (e.g. re-checking a submitted record on the server)::

    from formgate import validate

    result = validate(record, rules)
    if not result:
        return render_form(record, errors=result.errors)
    # result.data has the checked values
"""

from collections.abc import Mapping
from typing import Any

from formgate._ruleset import RuleSet, freeze_rules, keep_value, run_rules, strip_value
from formgate.config import FormConfig
from formgate.engine import FormValidation
from formgate.errors import ConfigurationError, FormgateError
from formgate.result import ValidationResult
from formgate.rules import (
    Validator,
    date_after,
    date_before,
    date_not_in_past,
    email,
    matches,
    max_length,
    max_value,
    min_length,
    min_value,
    number,
    one_of,
    password_match,
    password_strength,
    phone,
    positive_number,
    required,
)

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FormConfig",
    "FormValidation",
    "FormgateError",
    "RuleSet",
    "ValidationResult",
    "Validator",
    "date_after",
    "date_before",
    "date_not_in_past",
    "email",
    "matches",
    "max_length",
    "max_value",
    "min_length",
    "min_value",
    "number",
    "one_of",
    "password_match",
    "password_strength",
    "phone",
    "positive_number",
    "required",
    "validate",
]


def validate(
    data: Mapping[str, Any],
    rules: RuleSet,
    *,
    strip: bool = False,
) -> ValidationResult:
    """Validate data against a set of rules.

    Args:
        data: Any mapping of field names to values — a plain ``dict`` or a
            parsed form. Missing fields are checked as ``None``.
        rules: A mapping of field names to ordered validator lists. Each
            validator returns an error message string on failure, or
            ``None`` on success; the first failure wins.
        strip: Strip whitespace from string values before checking.

    Returns:
        A ``ValidationResult`` with ``.data`` (values of passing fields)
        and ``.errors`` (field → first error message).

    Raises:
        ConfigurationError: If *rules* is malformed.

    Example::

        result = validate(form, {
            "title": [required, max_length(200)],
            "body": [required, min_length(10)],
        })
        if not result:
            # result.errors == {"body": "This field must be at least 10 characters"}
            ...
    """
    return run_rules(data, freeze_rules(rules), strip_value if strip else keep_value)
