"""Plugin adapter for hosts that drive analysis through lifecycle events.

The host calls the hooks in order for each project run:

    on_configure(event)      event.data = {"options": {...}, "settings": {...}}
    on_project_start(event)  event.data = {"settings": {...}}
    on_project_end(event)    event.data = {"results": ProjectResult}
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .config import MetricsConfig
from .engine import ProjectMetricsEngine
from .exceptions import InvalidEventError, PluginStateError
from .logging_config import get_logger
from .models import ProjectResult

logger = get_logger(__name__)


@dataclass
class PluginEvent:
    """Event passed from the host to a plugin hook."""

    data: dict[str, Any] = field(default_factory=dict)


def _require_mapping(event: Optional[PluginEvent], hook: str, key: str) -> dict[str, Any]:
    if event is None or not isinstance(getattr(event, "data", None), dict):
        raise InvalidEventError(hook, "event has no data")
    value = event.data.get(key)
    if not isinstance(value, dict):
        raise InvalidEventError(hook, f"event data has no '{key}' mapping")
    return value


class ProjectMetricsPlugin:
    """Default project metrics gathering and calculation."""

    def __init__(self) -> None:
        self.settings: Optional[dict[str, Any]] = None

    def on_configure(self, event: Optional[PluginEvent]) -> None:
        """Fill in defaults for settings the user didn't provide.

        Recognized options:
            noCoreSize (bool): skip the visibility matrix, change cost and
                core size; defaults to False.
            pathStyle (str): "native", "posix" or "windows" path convention
                for module paths; defaults to "native".
        """
        options = _require_mapping(event, "on_configure", "options")
        settings = _require_mapping(event, "on_configure", "settings")
        config = MetricsConfig.from_options(options)
        settings["noCoreSize"] = config.no_core_size
        settings["pathStyle"] = config.path_style

    def on_project_start(self, event: Optional[PluginEvent]) -> None:
        """Store the settings shared by all project plugins."""
        self.settings = _require_mapping(event, "on_project_start", "settings")

    def on_project_end(self, event: Optional[PluginEvent]) -> None:
        """Compute project metrics and write them onto the results."""
        if self.settings is None:
            raise PluginStateError("on_project_end")
        if event is None or not isinstance(getattr(event, "data", None), dict):
            raise InvalidEventError("on_project_end", "event has no data")

        results = event.data.get("results")
        if not isinstance(results, ProjectResult):
            raise InvalidEventError("on_project_end", "event data has no 'results' ProjectResult")

        config = MetricsConfig.from_options(self.settings)
        logger.debug(
            "Running project metrics with noCoreSize=%s pathStyle=%s",
            config.no_core_size,
            config.path_style,
        )
        ProjectMetricsEngine(config).run(results)
