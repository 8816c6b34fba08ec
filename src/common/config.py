"""YAML config discovery plus a lazily-loaded process-wide config holder."""

import os
from pathlib import Path
from typing import Any, Callable, Generic, Optional, TypeVar

import yaml

T = TypeVar("T")

REPO_CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"


def find_config_path(
    config_name: Optional[str],
    config_dir: Optional[Path] = None,
    default_name: str = "prod",
    env_var: Optional[str] = None,
    dir_env_var: Optional[str] = None,
) -> Path:
    """Resolve ``<config_dir>/<config_name>.yaml``.

    An explicit argument wins over its environment variable, which wins over
    the default (``default_name`` / the repo's ``configs/`` directory).

    Raises:
        FileNotFoundError: If the resolved file doesn't exist
    """
    name = config_name or (env_var and os.environ.get(env_var)) or default_name
    directory = config_dir or _env_path(dir_env_var) or REPO_CONFIG_DIR

    config_path = Path(directory) / f"{name}.yaml"
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path


def _env_path(var: Optional[str]) -> Optional[Path]:
    value = os.environ.get(var) if var else None
    return Path(value) if value else None


def load_yaml(path: Path) -> dict:
    """Load a YAML mapping; an empty file is an empty config."""
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def section(raw: dict, name: str) -> dict:
    """Return the ``name`` block of a loaded config, ``{}`` when omitted."""
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return value


def secret(env_var: str, fallback: Any = None) -> Any:
    """Secrets come from the environment (.env locally); YAML only as fallback."""
    return os.getenv(env_var) or fallback


class ConfigSingleton(Generic[T]):
    """Holds one config instance for the process.

    Example:
        >>> _manager = ConfigSingleton(load_config)
        >>> get_config, set_config, reset_config = _manager.get, _manager.set, _manager.reset
    """

    def __init__(self, loader: Optional[Callable[[], T]] = None):
        self._config: Optional[T] = None
        self._loader = loader

    def get(self) -> T:
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        self._config = config

    def reset(self) -> None:
        """Drop the cached config so the next get() reloads it."""
        self._config = None
