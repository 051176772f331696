"""In-memory form launcher that records launches instead of opening windows."""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_layered_config import Config


@dataclass
class FormLaunchSpy:
    """Capture every ``launch_form`` call for later assertions.

    Attributes:
        launches: Configs passed to :meth:`launch_form`, in call order.
        error: Optional exception raised on each launch, to exercise the
            CLI failure paths.

    Example:
        >>> spy = FormLaunchSpy()
        >>> spy.launch_form(Config({}, {}))
        >>> len(spy.launches)
        1
    """

    launches: list[Config] = field(default_factory=list)
    error: BaseException | None = None

    def launch_form(self, config: Config) -> None:
        self.launches.append(config)
        if self.error is not None:
            raise self.error


__all__ = ["FormLaunchSpy"]
