"""Configuration loading for doctag (.doctag.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".doctag.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class TagConfig:
    """Which tag definitions make up the registry."""

    enabled: List[str] = field(default_factory=list)
    disabled: List[str] = field(default_factory=list)
    plugins: bool = True


@dataclass
class DiagnosticsConfig:
    """How non-fatal problems found in comments are reported."""

    ignore: List[str] = field(default_factory=list)
    strict: bool = False


@dataclass
class DocTagConfig:
    """Represents the settings defined in .doctag.yml."""

    root: Path
    tags: TagConfig = field(default_factory=TagConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def load_config(config_path: Path) -> DocTagConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocTagConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    tags = TagConfig()
    tag_data = _as_dict(data.get("tags"))
    if tag_data:
        tags.enabled = _as_str_list(tag_data.get("enabled"))
        tags.disabled = _as_str_list(tag_data.get("disabled"))
        plugins = _as_bool(tag_data.get("plugins"))
        if plugins is not None:
            tags.plugins = plugins

    diagnostics = DiagnosticsConfig()
    diagnostics_data = _as_dict(data.get("diagnostics"))
    if diagnostics_data:
        diagnostics.ignore = [pattern.lstrip("@") for pattern in _as_str_list(diagnostics_data.get("ignore"))]
        diagnostics.strict = _as_bool(diagnostics_data.get("strict")) or False

    return DocTagConfig(root=root, tags=tags, diagnostics=diagnostics)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DiagnosticsConfig",
    "DocTagConfig",
    "TagConfig",
    "load_config",
]
