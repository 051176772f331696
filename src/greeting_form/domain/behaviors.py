"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

NAME_PROMPT: Final[str] = "Please enter your name."
GREETING_TEMPLATE: Final[str] = "Hello, {name}!"


def format_greeting(name: str) -> str:
    r"""Return the greeting label text for a raw name.

    Leading and trailing whitespace is trimmed with :meth:`str.strip`, which
    also drops the ASCII separators U+001C to U+001F. A blank result yields the
    prompt asking for a name; anything else is substituted verbatim into
    the greeting template.

    Args:
        name: Raw text from the name input, possibly empty or whitespace only.

    Returns:
        Text to display in the greeting label.

    Example:
        >>> format_greeting("Test User")
        'Hello, Test User!'
        >>> format_greeting("  Ada  ")
        'Hello, Ada!'
        >>> format_greeting("   ")
        'Please enter your name.'
    """
    trimmed = name.strip()
    if not trimmed:
        return NAME_PROMPT
    return GREETING_TEMPLATE.format(name=trimmed)


__all__ = [
    "GREETING_TEMPLATE",
    "NAME_PROMPT",
    "format_greeting",
]
