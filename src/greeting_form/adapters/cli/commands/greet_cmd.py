"""Headless greeting command sharing the form's formatting logic.

Contents:
    * :func:`cli_greet` - Print the greeting the form would display.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeting_form.domain.behaviors import format_greeting

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False, default="")
def cli_greet(name: str) -> None:
    """Print the greeting label text for NAME without opening a window.

    An omitted or blank NAME prints the prompt asking for a name.
    """
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        logger.info("Formatting greeting", extra={"blank_name": not name.strip()})
        click.echo(format_greeting(name))


__all__ = ["cli_greet"]
