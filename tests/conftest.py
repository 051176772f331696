"""Shared pytest fixtures for domain, GUI, CLI and module-entry tests.

All shared fixtures live here; tests receive them implicitly through
pytest's conftest discovery.
"""

from __future__ import annotations

import re
import tkinter as tk
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeting_form.adapters.gui.form import GreetingForm
    from greeting_form.adapters.memory.gui import FormLaunchSpy
    from greeting_form.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Log records go to stderr; assert on ``result.stdout`` for command output.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from greeting_form.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, since a monkeypatched loader loses ``cache_clear``.
    """
    from greeting_form.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class FormCliContext:
    """Services factory and launch spy for CLI tests of the ``form`` command.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: FormLaunchSpy recording each launch.
        captured_profiles: Profile arguments passed to ``get_config``.
    """

    factory: Callable[[], Any]
    spy: FormLaunchSpy
    captured_profiles: list[str | None]


@pytest.fixture
def form_cli_context(
    clear_config_cache: None,
) -> Callable[..., FormCliContext]:
    """Create CLI services with injected config and a form launch spy.

    Only the I/O boundaries are replaced: ``get_config`` returns the given
    data and ``launch_form`` records calls. Logging stays real because the
    commands bind lib_log_rich context.

    Example:
        def test_form(cli_runner, form_cli_context) -> None:
            ctx = form_cli_context({"form": {"title": "Front Desk"}})
            cli_runner.invoke(cli, ["form"], obj=ctx.factory)
            assert ctx.spy.launches[0]["form"]["title"] == "Front Desk"
    """
    from greeting_form.adapters.memory.gui import FormLaunchSpy as FormLaunchSpyImpl
    from greeting_form.composition import AppServices, build_production

    def _create(config_data: dict[str, Any] | None = None, *, error: BaseException | None = None) -> FormCliContext:
        spy = FormLaunchSpyImpl(error=error)
        config = Config(config_data or {}, {})
        captured: list[str | None] = []
        prod = build_production()

        def _fake_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured.append(profile)
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            launch_form=spy.launch_form,
        )
        return FormCliContext(factory=lambda: test_services, spy=spy, captured_profiles=captured)

    return _create


@pytest.fixture
def tk_root() -> Iterator[tk.Tk]:
    """Provide a withdrawn Tk root, skipping the test when no display exists."""
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk display unavailable: {exc}")
    root.withdraw()
    try:
        yield root
    finally:
        root.destroy()


@pytest.fixture
def form(tk_root: tk.Tk) -> GreetingForm:
    """Provide a packed GreetingForm with default settings."""
    from greeting_form.adapters.gui.form import GreetingForm

    form = GreetingForm(tk_root)
    form.pack()
    tk_root.update_idletasks()
    return form
