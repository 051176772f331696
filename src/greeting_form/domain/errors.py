"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class DisplayUnavailableError(RuntimeError):
    """No graphical display is available to host the form.

    Raised by the GUI adapter when the windowing toolkit cannot connect to
    a display (headless servers, CI runners without a virtual framebuffer).
    Caught at the CLI boundary and mapped to a dedicated exit code.

    Example:
        >>> err = DisplayUnavailableError("no display name and no $DISPLAY environment variable")
        >>> isinstance(err, RuntimeError)
        True
    """


class ElementNotFoundError(LookupError):
    """A form element could not be located by its identifier.

    Example:
        >>> err = ElementNotFoundError("greet_button")
        >>> str(err)
        'greet_button'
        >>> isinstance(err, LookupError)
        True
    """


__all__ = [
    "DisplayUnavailableError",
    "ElementNotFoundError",
]
