"""GUI adapter - the Tk desktop form.

Contents:
    * :mod:`.settings` - ``[form]`` section validation
    * :mod:`.form` - :class:`GreetingForm` widget
    * :mod:`.launcher` - root window creation and :func:`launch_form`
"""

from __future__ import annotations

from .form import GreetingForm
from .launcher import build_form, create_root, launch_form
from .settings import FormConfigModel, load_form_settings

__all__ = [
    "FormConfigModel",
    "GreetingForm",
    "build_form",
    "create_root",
    "launch_form",
    "load_form_settings",
]
