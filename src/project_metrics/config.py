"""Configuration loading and management for project-metrics.

Configuration sources are merged in priority order:
    1. Defaults (defined in MetricsConfig)
    2. Project config (./project-metrics.toml)
    3. Explicit config file
    4. Environment variables (PROJECT_METRICS_* prefix)
    5. Keyword overrides (typically CLI flags)

A plugin host hands options over as a plain mapping instead; see
``MetricsConfig.from_options``.

Example:
    >>> config = load_config(no_core_size=True)
    >>> config.no_core_size
    True
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import tomllib
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Literal, Mapping, Optional, get_args, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

PathStyle = Literal["native", "posix", "windows"]

CONFIG_FILE_NAME = "project-metrics.toml"
ENV_PREFIX = "PROJECT_METRICS_"
DEFAULT_PATH_STYLE: PathStyle = "native"

_PATH_MODULES: dict[str, ModuleType] = {
    "native": os.path,
    "posix": posixpath,
    "windows": ntpath,
}


@dataclass(frozen=True)
class MetricsConfig:
    """Options for a project metrics run.

    Attributes:
        no_core_size: Skip the visibility matrix, change cost and core size.
            The closure is O(N^3), so large projects may want it off.
        path_style: Path convention used to resolve dependency specifiers.
            "native" follows the running interpreter's platform.
        show_matrices: Print the adjacency and visibility matrices in rich
            CLI output.
    """

    no_core_size: bool = False
    path_style: PathStyle = DEFAULT_PATH_STYLE
    show_matrices: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("no_core_size", "show_matrices"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigError(name, value, "expected a boolean")

        if self.path_style not in get_args(PathStyle):
            raise InvalidConfigError(
                "path_style",
                self.path_style,
                f"expected one of {', '.join(get_args(PathStyle))}",
            )

    @property
    def path_module(self) -> ModuleType:
        """Path module matching ``path_style``."""
        return path_module(self.path_style)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "MetricsConfig":
        """Build a config from host plugin options.

        Recognized options:
            noCoreSize (bool): anything that is not a real boolean falls
                back to False.
            pathStyle (str): "native", "posix" or "windows"; anything else
                falls back to "native".
        """
        no_core_size = options.get("noCoreSize")
        if not isinstance(no_core_size, bool):
            no_core_size = False
        style = options.get("pathStyle")
        if style not in get_args(PathStyle):
            style = DEFAULT_PATH_STYLE
        return cls(no_core_size=no_core_size, path_style=style)


DEFAULT_CONFIG = MetricsConfig()


def path_module(style: str) -> ModuleType:
    """Return ``os.path``, ``posixpath`` or ``ntpath`` for a path style."""
    try:
        return _PATH_MODULES[style]
    except KeyError:
        raise InvalidConfigError(
            "path_style", style, f"expected one of {', '.join(_PATH_MODULES)}"
        ) from None


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> MetricsConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options don't mask file values.

    Returns:
        Validated MetricsConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or holds
            unknown keys
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(MetricsConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(
            "Unknown configuration keys", details={"keys": ", ".join(unknown)}
        )

    return MetricsConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from PROJECT_METRICS_* environment variables.

    Supported environment variables:
        PROJECT_METRICS_NO_CORE_SIZE: bool (true/false/1/0)
        PROJECT_METRICS_PATH_STYLE: native/posix/windows
        PROJECT_METRICS_SHOW_MATRICES: bool

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(MetricsConfig)

    result: dict[str, Any] = {}

    for field_name in MetricsConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.strip().lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    # Literal types such as PathStyle are validated by MetricsConfig itself
    return value.strip()


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file.

    Both a flat layout and a ``[project-metrics]`` table are accepted.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e

    section = data.get("project-metrics")
    if isinstance(section, dict):
        return dict(section)
    return data
