"""Plugin lifecycle exceptions: malformed host events and out-of-order hooks."""

from .base import ProjectMetricsError


class PluginError(ProjectMetricsError):
    """Base class for plugin lifecycle errors."""

    pass


class InvalidEventError(PluginError):
    """Raised when a host event is missing the data a hook needs."""

    def __init__(self, hook: str, reason: str):
        super().__init__(
            f"Invalid event passed to {hook}",
            details={"hook": hook, "reason": reason},
        )
        self.hook = hook
        self.reason = reason


class PluginStateError(PluginError):
    """Raised when a hook runs before the plugin has been started."""

    def __init__(self, hook: str):
        super().__init__(
            f"{hook} called before on_project_start",
            details={"hook": hook},
        )
        self.hook = hook
