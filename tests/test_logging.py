"""Tests for the logging configuration model and runtime config mapping.

init_logging itself is exercised through the CLI tests, which wire the
production logging adapter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from greeting_form import __init__conf__
from greeting_form.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "kiosk", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "kiosk"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces sensible defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_service_defaults_to_package_name(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Without a configured service the package name is used."""
    runtime_config = _build_runtime_config(config_factory({}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Values from [lib_log_rich] reach the runtime config."""
    runtime_config = _build_runtime_config(
        config_factory({"lib_log_rich": {"service": "front-desk", "environment": "staging"}})
    )

    assert runtime_config.service == "front-desk"
    assert runtime_config.environment == "staging"
