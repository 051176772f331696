"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Greeting command from :mod:`.greet_cmd`
    * Form command from :mod:`.form_cmd`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .form_cmd import cli_form
from .greet_cmd import cli_greet
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_form",
    "cli_greet",
    "cli_info",
]
