"""Type-safe domain enums for output formats and form elements."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class FormElement(str, Enum):
    """Stable identifiers of the widgets on the greeting form.

    Automation looks widgets up by these names, so they must not change
    when the layout or labels do.

    Attributes:
        NAME_TEXT_BOX: Entry the user types a name into.
        GREET_BUTTON: Button that refreshes the greeting.
        GREETING_TEXT_BLOCK: Label displaying the greeting text.

    Example:
        >>> FormElement.GREET_BUTTON.value
        'greet_button'
    """

    NAME_TEXT_BOX = "name_text_box"
    GREET_BUTTON = "greet_button"
    GREETING_TEXT_BLOCK = "greeting_text_block"


__all__ = [
    "FormElement",
    "OutputFormat",
]
