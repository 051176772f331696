"""Static package metadata surfaced to CLI commands and documentation.

Keeps the values the CLI needs (version, shell command, configuration
identifiers) in one importable place so no entry point has to query
installed distribution metadata at runtime.

Contents:
    * Module-level metadata constants.
    * :func:`print_info` - Render the metadata block for ``info``.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "greeting_form"
#: Human-readable summary shown in CLI help output.
title = "Minimal desktop form that greets the name you type"
#: Current release version.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/greeting-form/greeting_form"
#: Author attribution surfaced in metadata.
author = "greeting-form maintainers"
#: Contact email surfaced in metadata.
author_email = "maintainers@greeting-form.dev"
#: Console-script name published by the package.
shell_command = "greeting-form"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "greeting-form"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "Greeting Form"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "greeting-form"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeting_form:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
