"""Form configuration.

FormConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Per-form engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(name="leave-request", strip_whitespace=True)
    """

    # Identifies the form in log records
    name: str = "form"

    # Strip leading/trailing whitespace from string values before the rules
    # see them ("   " then fails ``required``)
    strip_whitespace: bool = False
