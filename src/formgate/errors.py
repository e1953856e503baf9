"""formgate exception hierarchy.

A field that fails validation is not an exception; it is reported as a
message string. These types cover misuse of the library itself.
"""


class FormgateError(Exception):
    """Base for all formgate-specific errors."""


class ConfigurationError(FormgateError):
    """Raised when a rule set is malformed.

    Checked when a ``FormValidation`` is built, on ``set_rules()``, and by
    ``validate()``, so a typo in a rule list fails at setup instead of on
    the first keystroke.
    """
