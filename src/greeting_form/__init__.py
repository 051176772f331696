"""Public package surface exposing the greeting formatter, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: the greeting formatter and its text constants
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    GREETING_TEMPLATE,
    NAME_PROMPT,
    format_greeting,
)

__all__ = [
    "GREETING_TEMPLATE",
    "NAME_PROMPT",
    "format_greeting",
    "get_config",
    "print_info",
]
