"""End-to-end stories driving the form like a user would.

Widgets are located by their automation identifiers only, text is typed
into the input and the button is clicked; the result is read back from
the label.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import cast

import pytest
from lib_layered_config import Config

from greeting_form.adapters.gui import launcher
from greeting_form.adapters.gui.form import GreetingForm
from greeting_form.adapters.gui.launcher import build_form, create_root, launch_form
from greeting_form.adapters.gui.settings import FormConfigModel
from greeting_form.domain.enums import FormElement
from greeting_form.domain.errors import DisplayUnavailableError


def _type_into(entry: ttk.Entry, text: str) -> None:
    entry.focus_set()
    entry.delete(0, tk.END)
    entry.insert(tk.END, text)


def _click_greet(root: tk.Misc, form: GreetingForm, name: str) -> str:
    name_box = cast(ttk.Entry, form.find_element(FormElement.NAME_TEXT_BOX))
    button = cast(ttk.Button, form.find_element(FormElement.GREET_BUTTON))
    label = form.find_element(FormElement.GREETING_TEXT_BLOCK)

    _type_into(name_box, name)
    root.update_idletasks()
    # Press and release over the button, as the pointer would.
    button.event_generate("<ButtonPress-1>", x=2, y=2)
    button.event_generate("<ButtonRelease-1>", x=2, y=2)
    root.update()
    return str(label.cget("text"))


@pytest.mark.gui
def test_clicking_greet_with_name_shows_greeting(tk_root: tk.Tk) -> None:
    """Typing a name and clicking Greet shows the greeting."""
    form = build_form(tk_root, FormConfigModel())

    assert _click_greet(tk_root, form, "FlaUI User") == "Hello, FlaUI User!"


@pytest.mark.gui
def test_clicking_greet_with_empty_name_shows_prompt(tk_root: tk.Tk) -> None:
    """Clicking Greet with an empty input shows the prompt."""
    form = build_form(tk_root, FormConfigModel())

    assert _click_greet(tk_root, form, "") == "Please enter your name."


@pytest.mark.gui
def test_clicking_greet_with_whitespace_shows_prompt(tk_root: tk.Tk) -> None:
    """Clicking Greet with only spaces shows the prompt."""
    form = build_form(tk_root, FormConfigModel())

    assert _click_greet(tk_root, form, "   ") == "Please enter your name."


@pytest.mark.gui
def test_repeated_clicks_follow_the_current_input(tk_root: tk.Tk) -> None:
    """Each click reflects the input at that moment."""
    form = build_form(tk_root, FormConfigModel())

    assert _click_greet(tk_root, form, "Test User") == "Hello, Test User!"
    assert _click_greet(tk_root, form, "") == "Please enter your name."
    assert _click_greet(tk_root, form, "Ada") == "Hello, Ada!"


@pytest.mark.gui
def test_create_root_applies_title(tk_root: tk.Tk) -> None:
    """The window title comes from the settings."""
    root = create_root(FormConfigModel(title="Front Desk", geometry="400x180"))
    try:
        assert root.title() == "Front Desk"
    finally:
        root.destroy()


@pytest.mark.gui
def test_launch_form_runs_main_loop_with_configured_window(
    tk_root: tk.Tk,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """launch_form builds the configured window and enters the main loop."""
    seen: list[tuple[str, str]] = []

    def fake_mainloop(self: tk.Tk, n: int = 0) -> None:
        form = next(child for child in self.winfo_children() if isinstance(child, GreetingForm))
        seen.append((self.title(), _click_greet(self, form, "Loop User")))
        self.destroy()

    monkeypatch.setattr(tk.Tk, "mainloop", fake_mainloop)

    launch_form(Config({"form": {"title": "Kiosk"}}, {}))

    assert seen == [("Kiosk", "Hello, Loop User!")]


@pytest.mark.os_agnostic
def test_launch_form_without_display_raises_display_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    """A TclError from Tk becomes DisplayUnavailableError."""

    def no_display() -> tk.Tk:
        raise tk.TclError("no display name and no $DISPLAY environment variable")

    monkeypatch.setattr(launcher.tk, "Tk", no_display)

    with pytest.raises(DisplayUnavailableError, match="no display name"):
        launch_form(Config({}, {}))


class _RootWithoutDisplay:
    """Stands in for tk.Tk and records whether the window was torn down."""

    instances: list[_RootWithoutDisplay] = []

    def __init__(self) -> None:
        self.destroyed = False
        _RootWithoutDisplay.instances.append(self)

    def title(self, _title: str) -> None:
        pass

    def geometry(self, _geometry: str) -> None:
        pass

    def destroy(self) -> None:
        self.destroyed = True


@pytest.mark.os_agnostic
def test_launch_form_destroys_root_when_building_the_form_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failure after the window exists still closes the window."""
    _RootWithoutDisplay.instances.clear()

    def broken_build(_root: object, _settings: FormConfigModel) -> GreetingForm:
        raise RuntimeError("theme missing")

    monkeypatch.setattr(launcher.tk, "Tk", _RootWithoutDisplay)
    monkeypatch.setattr(launcher, "build_form", broken_build)

    with pytest.raises(RuntimeError, match="theme missing"):
        launch_form(Config({}, {}))

    assert [root.destroyed for root in _RootWithoutDisplay.instances] == [True]
