"""Command opening the desktop greeting form.

Contents:
    * :func:`cli_form` - Launch the Tk window and wait until it is closed.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from greeting_form.domain.errors import DisplayUnavailableError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("form", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_form(ctx: click.Context) -> None:
    """Open the greeting form window.

    Window title, size and labels come from the ``[form]`` configuration
    section, e.g. ``--set form.title="Front Desk"``.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-form", extra={"command": "form", "profile": cli_ctx.profile}):
        logger.info("Launching greeting form")
        try:
            cli_ctx.services.launch_form(cli_ctx.config)
        except DisplayUnavailableError as exc:
            logger.error("No display available for the form", extra={"reason": str(exc)})
            click.echo(f"Error: cannot open the form window: {exc}", err=True)
            raise SystemExit(ExitCode.DISPLAY_UNAVAILABLE) from exc
        except ValidationError as exc:
            click.echo(f"Error: invalid [form] configuration:\n{exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc


__all__ = ["cli_form"]
