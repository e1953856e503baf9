"""Rule set normalization and the first-failure runner.

Shared by ``validate()`` and ``FormValidation`` so the stateless gate and
the interactive engine always agree on a record's outcome.
"""

from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from formgate.errors import ConfigurationError
from formgate.result import ValidationResult
from formgate.rules import Validator

type RuleSet = Mapping[str, Sequence[Validator]]
type FrozenRuleSet = Mapping[str, tuple[Validator, ...]]


def freeze_rules(rules: RuleSet) -> FrozenRuleSet:
    """Copy *rules* into a read-only mapping of tuples.

    Raises:
        ConfigurationError: If a field name is not a string, a rule list is
            not a sequence, or an entry is not callable.
    """
    if not isinstance(rules, Mapping):
        msg = f"Rules must be a mapping of field name to validators, got {type(rules).__name__}"
        raise ConfigurationError(msg)

    frozen: dict[str, tuple[Validator, ...]] = {}
    for field_name, validators in rules.items():
        if not isinstance(field_name, str):
            msg = f"Field names must be strings, got {field_name!r}"
            raise ConfigurationError(msg)
        # A bare string is a Sequence but never a rule list
        if isinstance(validators, str) or not isinstance(validators, Sequence):
            msg = (
                f"Rules for {field_name!r} must be a list of validators, "
                f"got {type(validators).__name__}"
            )
            raise ConfigurationError(msg)
        for index, validator in enumerate(validators):
            if not callable(validator):
                msg = f"Rule {index} for {field_name!r} is not callable: {validator!r}"
                raise ConfigurationError(msg)
        frozen[field_name] = tuple(validators)
    return MappingProxyType(frozen)


def first_error(validators: Sequence[Validator], value: Any) -> str | None:
    """Run *validators* in order and return the first error message."""
    for validator in validators:
        error = validator(value)
        if error:
            return error
    return None


def run_rules(
    data: Mapping[str, Any],
    rules: FrozenRuleSet,
    prepare: Callable[[Any], Any],
) -> ValidationResult:
    """Check every field in *rules* against *data*."""
    errors: dict[str, str] = {}
    cleaned: dict[str, Any] = {}

    for field_name, validators in rules.items():
        value = prepare(data.get(field_name))
        error = first_error(validators, value)
        if error:
            errors[field_name] = error
        else:
            cleaned[field_name] = value

    return ValidationResult(data=cleaned, errors=errors)


def strip_value(value: Any) -> Any:
    """Strip surrounding whitespace from strings; other values pass through."""
    if isinstance(value, str):
        return value.strip()
    return value


def keep_value(value: Any) -> Any:
    return value
