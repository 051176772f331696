"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting formatting
    * :mod:`.enums` - Domain enumerations (OutputFormat, FormElement)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    GREETING_TEMPLATE,
    NAME_PROMPT,
    format_greeting,
)
from .enums import FormElement, OutputFormat
from .errors import DisplayUnavailableError, ElementNotFoundError

__all__ = [
    # Behaviors
    "GREETING_TEMPLATE",
    "NAME_PROMPT",
    "format_greeting",
    # Enums
    "FormElement",
    "OutputFormat",
    # Errors
    "DisplayUnavailableError",
    "ElementNotFoundError",
]
