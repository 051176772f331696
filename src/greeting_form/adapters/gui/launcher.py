"""Window construction and the blocking entry point behind the ``form`` command."""

from __future__ import annotations

import logging
import tkinter as tk

from lib_layered_config import Config

from greeting_form.domain.errors import DisplayUnavailableError

from .form import GreetingForm
from .settings import FormConfigModel, load_form_settings

logger = logging.getLogger(__name__)


def create_root(settings: FormConfigModel) -> tk.Tk:
    """Create the Tk root window titled and sized from ``settings``.

    Raises:
        DisplayUnavailableError: If Tk cannot connect to a display.
    """
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        raise DisplayUnavailableError(str(exc)) from exc
    root.title(settings.title)
    root.geometry(settings.geometry)
    return root


def build_form(root: tk.Misc, settings: FormConfigModel) -> GreetingForm:
    """Attach a :class:`GreetingForm` filling ``root`` and focus the name input."""
    form = GreetingForm(root, settings=settings)
    form.pack(fill=tk.BOTH, expand=True)
    form.name_text_box.focus_set()
    return form


def launch_form(config: Config) -> None:
    """Open the greeting form and run the Tk main loop until it is closed.

    Args:
        config: Loaded configuration; only the ``[form]`` section is read.

    Raises:
        DisplayUnavailableError: If no display is available.
        pydantic.ValidationError: If the ``[form]`` section is invalid.
    """
    settings = load_form_settings(config)
    root = create_root(settings)
    try:
        build_form(root, settings)
        logger.info("Opening greeting form", extra={"title": settings.title, "geometry": settings.geometry})
        root.mainloop()
    except Exception:
        root.destroy()
        raise
    logger.info("Greeting form closed")


__all__ = [
    "build_form",
    "create_root",
    "launch_form",
]
