"""Validated window settings read from the ``[form]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field


class FormConfigModel(BaseModel):
    """Pydantic model for the ``[form]`` config section.

    Unknown keys are rejected so a typo in a user config file surfaces as an
    error instead of being silently ignored. Numbers are accepted as text,
    since ``--set form.title=2024`` arrives JSON-coerced as an int.

    Example:
        >>> FormConfigModel().title
        'Greeting Form'
        >>> FormConfigModel(geometry="640x200").geometry
        '640x200'
    """

    title: str = "Greeting Form"
    geometry: str = Field(default="360x160", pattern=r"^\d+x\d+$")
    prompt_label: str = "Name:"
    button_label: str = "Greet"

    model_config = ConfigDict(extra="forbid", frozen=True, coerce_numbers_to_str=True)


def load_form_settings(config: Config) -> FormConfigModel:
    """Parse the ``[form]`` section, falling back to defaults when absent.

    Raises:
        pydantic.ValidationError: If the section holds unknown keys or a
            malformed geometry string.

    Example:
        >>> load_form_settings(Config({"form": {"title": "Front Desk"}}, {})).title
        'Front Desk'
        >>> load_form_settings(Config({}, {})).button_label
        'Greet'
    """
    form_raw: object = config.get("form", default={})
    return FormConfigModel.model_validate(cast("dict[str, object]", form_raw) if form_raw else {})


__all__ = [
    "FormConfigModel",
    "load_form_settings",
]
