"""Tk frame hosting the name input, the greet button and the greeting label.

The frame only moves text between widgets; the greeting itself comes from
:func:`greeting_form.domain.behaviors.format_greeting`. Widgets are created
with the names from :class:`~greeting_form.domain.enums.FormElement` so
automation can locate them without knowing the layout.
"""

from __future__ import annotations

import logging
import tkinter as tk
from collections.abc import Callable
from tkinter import ttk

from greeting_form.domain.behaviors import format_greeting
from greeting_form.domain.enums import FormElement
from greeting_form.domain.errors import ElementNotFoundError

from .settings import FormConfigModel

logger = logging.getLogger(__name__)


class GreetingForm(ttk.Frame):
    """Three-widget greeting form.

    Args:
        master: Parent widget, usually the Tk root.
        settings: Labels for the prompt and the button. Defaults to
            :class:`FormConfigModel` defaults.
        formatter: Function turning the raw name into label text.
    """

    def __init__(
        self,
        master: tk.Misc,
        *,
        settings: FormConfigModel | None = None,
        formatter: Callable[[str], str] = format_greeting,
    ) -> None:
        super().__init__(master, padding=12)
        settings = settings or FormConfigModel()
        self._formatter = formatter

        ttk.Label(self, text=settings.prompt_label).grid(row=0, column=0, sticky="w", padx=(0, 8))
        self.name_text_box = ttk.Entry(self, name=FormElement.NAME_TEXT_BOX.value, width=30)
        self.name_text_box.grid(row=0, column=1, sticky="ew")
        self.greet_button = ttk.Button(
            self,
            name=FormElement.GREET_BUTTON.value,
            text=settings.button_label,
            command=self.update_greeting,
        )
        self.greet_button.grid(row=1, column=1, sticky="e", pady=8)
        self.greeting_text_block = ttk.Label(self, name=FormElement.GREETING_TEXT_BLOCK.value, text="")
        self.greeting_text_block.grid(row=2, column=0, columnspan=2, sticky="w")

        self.columnconfigure(1, weight=1)

    @property
    def name_text(self) -> str:
        """Current contents of the name input."""
        return self.name_text_box.get()

    @property
    def greeting_text(self) -> str:
        """Text currently shown in the greeting label."""
        return str(self.greeting_text_block.cget("text"))

    def update_greeting(self) -> str:
        """Recompute the greeting from the name input and show it.

        Returns:
            The text written to the greeting label.
        """
        text = self._formatter(self.name_text)
        self.greeting_text_block.configure(text=text)
        logger.debug("Greeting label updated", extra={"greeting": text})
        return text

    def set_name_and_trigger_update(self, name: str) -> str:
        """Replace the name input with ``name`` and refresh the greeting."""
        self.name_text_box.delete(0, tk.END)
        self.name_text_box.insert(0, name)
        return self.update_greeting()

    def find_element(self, identifier: FormElement | str) -> tk.Misc:
        """Return the child widget registered under ``identifier``.

        Raises:
            ElementNotFoundError: If no child widget carries that name.
        """
        key = identifier.value if isinstance(identifier, FormElement) else identifier
        # Direct children only, never Tk paths such as "."
        widget = self.children.get(key)
        if widget is None:
            raise ElementNotFoundError(key)
        return widget


__all__ = ["GreetingForm"]
