"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no display, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.gui` - Form launcher spy
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .gui import FormLaunchSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from greeting_form.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LaunchForm,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_launch_form: LaunchForm = FormLaunchSpy().launch_form

__all__ = [
    "FormLaunchSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
