"""Project configuration loaded from ``.jsdoc-serializer.yaml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".jsdoc-serializer.yaml"

DEFAULT_EXTENSIONS = [".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx"]
DEFAULT_EXCLUDE = ["node_modules", ".git", "dist"]


def _as_list(value: Any) -> list[Any]:
    """Treat a bare scalar as a one-item list and null as empty."""
    if value is None:
        return []
    if isinstance(value, (str, int, float)):
        return [value]
    return list(value)


@dataclass
class SerializerConfig:
    """Settings for file discovery and compilation."""

    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    attach_todos: bool = False
    indent: int = 2

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SerializerConfig:
        """Create config from dictionary, keeping defaults for missing keys."""
        config = cls()
        if "extensions" in data:
            config.extensions = [
                ext if ext.startswith(".") else f".{ext}" for ext in map(str, _as_list(data["extensions"]))
            ]
        if "exclude" in data:
            config.exclude = [str(item) for item in _as_list(data["exclude"])]
        if "attach_todos" in data:
            config.attach_todos = bool(data["attach_todos"])
        if "indent" in data:
            config.indent = int(data["indent"])
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "extensions": list(self.extensions),
            "exclude": list(self.exclude),
            "attach_todos": self.attach_todos,
            "indent": self.indent,
        }


def load_config(path: Path | str | None = None) -> SerializerConfig:
    """Load configuration from a YAML file.

    Args:
        path: Config file, or a directory containing ``.jsdoc-serializer.yaml``.
            Defaults to the current directory.

    Returns:
        SerializerConfig; defaults when the file is missing or unreadable.
    """
    config_path = Path(path) if path is not None else Path.cwd()
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILENAME

    if not config_path.exists():
        return SerializerConfig()

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except (yaml.YAMLError, OSError) as e:
        # Config is optional; fall back to defaults
        logger.warning("Could not load config from %s: %s", config_path, e)
        return SerializerConfig()

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", config_path)
        return SerializerConfig()

    try:
        return SerializerConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning("Invalid config in %s: %s", config_path, e)
        return SerializerConfig()


def save_config(config: SerializerConfig, path: Path | str) -> None:
    """Save configuration to a YAML file.

    Args:
        config: Configuration to write.
        path: Target file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))
