"""Interactive form validation — touched tracking and lazy error display.

``FormValidation`` sits between a form layer and its rule set. The form
layer owns the field values and reports every edit; the engine decides
which errors the user is allowed to see.

Display policy, per field:

- untouched: errors are never shown, and ``on_change`` computes nothing,
  so nothing flashes while the user types a first value.
- touched (after ``on_blur`` or ``validate_all``): every ``on_change``
  recomputes the error immediately.

Touched is one-way until ``clear_errors()``.

Usage::

    from functools import partial
    from formgate import FormValidation, date_after, email, required

    def leave_rules(record):
        return {
            "email": [partial(required, label="Email"), email],
            "end_date": [
                partial(required, label="End date"),
                date_after(record.get("start_date")),
            ],
        }

    form = FormValidation(leave_rules(record))
    form.on_change("email", "al")          # silent
    form.on_blur("email", "al")            # touched; error now visible
    form.get_field_error("email")          # "Please enter a valid email address"

    # start_date changed: rebuild the cross-field rules
    form.set_rules(leave_rules(record))

    if form.validate_all(record):
        submit(record)
"""

import logging
from collections.abc import Mapping
from typing import Any

from formgate._ruleset import (
    FrozenRuleSet,
    RuleSet,
    first_error,
    freeze_rules,
    keep_value,
    run_rules,
    strip_value,
)
from formgate.config import FormConfig
from formgate.result import ValidationResult

logger = logging.getLogger("formgate.engine")


class FormValidation:
    """Rule set plus per-field touched and error state for one form.

    Exceptions raised by a validator are not caught; a throwing rule is a
    bug in the rule, not an invalid field.
    """

    __slots__ = ("_config", "_errors", "_prepare", "_rules", "_touched")

    def __init__(self, rules: RuleSet, config: FormConfig | None = None) -> None:
        self._config = config or FormConfig()
        self._rules: FrozenRuleSet = freeze_rules(rules)
        self._prepare = strip_value if self._config.strip_whitespace else keep_value
        self._touched: dict[str, bool] = {}
        self._errors: dict[str, str] = {}
        logger.debug(
            "Form %r created with rules for %d field(s)",
            self._config.name,
            len(self._rules),
        )

    # -- Configuration --

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def rules(self) -> FrozenRuleSet:
        """The current rule set (read-only)."""
        return self._rules

    def set_rules(self, rules: RuleSet) -> None:
        """Replace the rule set, keeping touched and error state.

        Call this with a freshly built rule set whenever a value that a
        cross-field rule closed over has changed. Stored errors are not
        recomputed; the next ``on_change``/``on_blur`` for a field, or
        ``validate_all``, picks up the new rules.
        """
        self._rules = freeze_rules(rules)
        logger.debug("Form %r rules replaced (%d field(s))", self._config.name, len(self._rules))

    # -- State views --

    @property
    def errors(self) -> dict[str, str]:
        """Snapshot of every recorded error, visible or not."""
        return dict(self._errors)

    @property
    def touched(self) -> dict[str, bool]:
        """Snapshot of the touched set."""
        return dict(self._touched)

    @property
    def has_errors(self) -> bool:
        """True if any field has a recorded error, touched or not."""
        return bool(self._errors)

    # -- Validation --

    def validate_field(self, field: str, value: Any) -> str | None:
        """Return the first error for *value* under *field*'s rules.

        Has no side effects. Fields without rules are always valid.
        """
        validators = self._rules.get(field)
        if not validators:
            return None
        return first_error(validators, self._prepare(value))

    def result(self, record: Mapping[str, Any]) -> ValidationResult:
        """Check *record* against every rule without changing any state."""
        return run_rules(record, self._rules, self._prepare)

    def validate_all(self, record: Mapping[str, Any]) -> bool:
        """Validate every ruled field and make all of them visible.

        Replaces the error and touched sets wholesale. Every field in the
        rule set ends up touched, including the ones that passed.

        Returns:
            True if no field produced an error.
        """
        outcome = self.result(record)
        self._errors = dict(outcome.errors)
        self._touched = dict.fromkeys(self._rules, True)
        if outcome.is_valid:
            logger.debug("Form %r passed validation", self._config.name)
        else:
            logger.debug(
                "Form %r failed validation on %d field(s): %s",
                self._config.name,
                len(outcome.errors),
                ", ".join(outcome.errors),
            )
        return outcome.is_valid

    # -- Events --

    def on_blur(self, field: str, value: Any) -> None:
        """Mark *field* touched and store its current error."""
        self._touched[field] = True
        error = self._store(field, value)
        logger.debug("Form %r field %r blurred: %s", self._config.name, field, error or "ok")

    def on_change(self, field: str, value: Any) -> None:
        """Revalidate *field* if it has been touched; otherwise do nothing."""
        if self._touched.get(field):
            self._store(field, value)

    def get_field_error(self, field: str) -> str | None:
        """Return *field*'s error if the user may see it, else ``None``."""
        if not self._touched.get(field):
            return None
        return self._errors.get(field)

    def clear_errors(self) -> None:
        """Forget all touched and error state (form closed or reset)."""
        self._touched = {}
        self._errors = {}
        logger.debug("Form %r state cleared", self._config.name)

    def _store(self, field: str, value: Any) -> str | None:
        error = self.validate_field(field, value)
        if error:
            self._errors[field] = error
        else:
            self._errors.pop(field, None)
        return error

    def __repr__(self) -> str:
        return (
            f"FormValidation({self._config.name!r}, fields={len(self._rules)}, "
            f"touched={len(self._touched)}, errors={len(self._errors)})"
        )
