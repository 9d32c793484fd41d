"""Configuration management for consolehook."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def get_config_path() -> Path:
    """Get the path to the consolehook config file."""
    xdg_config = Path.home() / ".config"
    return xdg_config / "consolehook" / "config.toml"


def get_default_config() -> str:
    """Return the default config file contents."""
    return """\
# consolehook configuration

[registry]
# Swallow intercepted calls instead of forwarding them to the original
# method once observers have run.
silent = false

# Restrict which method names a registry probes on its host.
# Leave unset to use every conventional name (log, warn, error, ...).
# methods = ["log", "warn", "error"]
"""


@dataclass
class RegistryConfig:
    """Defaults for InterceptionRegistry.from_config."""

    silent: bool = False
    methods: list[str] | None = None  # None means the conventional set


@dataclass
class Config:
    """consolehook configuration."""

    registry: RegistryConfig = field(default_factory=RegistryConfig)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file, or return defaults."""
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return Config()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        # Log warning but return defaults
        print(f"Warning: Could not load config from {config_path}: {e}")
        return Config()

    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse config dict into Config object."""
    registry_data = data.get("registry", {})
    methods = registry_data.get("methods")
    registry = RegistryConfig(
        silent=bool(registry_data.get("silent", False)),
        methods=[str(m) for m in methods] if methods is not None else None,
    )
    return Config(registry=registry)


def ensure_config_exists() -> Path:
    """Ensure the config file exists, creating with defaults if needed."""
    config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(get_default_config())

    return config_path
