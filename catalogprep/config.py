"""Configuration loading for catalogprep (.catalogprep.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import DEFAULT_COMPONENTS_DIR, DEFAULT_CORE_DIR, DEFAULT_OUTPUT_DIR

CONFIG_FILENAME = ".catalogprep.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReportConfig:
    """Where to write the optional markdown report."""

    file: Optional[Path] = None
    templates_dir: Optional[Path] = None


@dataclass
class CatalogConfig:
    """Directory layout used by a catalog preparation run."""

    root: Path
    components_dir: Path
    core_dir: Path
    output_dir: Path
    report: ReportConfig = field(default_factory=ReportConfig)

    @property
    def models_out_dir(self) -> Path:
        return self.output_dir / "models"

    @property
    def components_out_dir(self) -> Path:
        return self.output_dir / "components"

    @property
    def dataformats_out_dir(self) -> Path:
        return self.output_dir / "dataformats"


def default_config(root: Path) -> CatalogConfig:
    """Return the layout used when no configuration file is present."""
    root = root.resolve()
    return CatalogConfig(
        root=root,
        components_dir=_resolve(root, DEFAULT_COMPONENTS_DIR),
        core_dir=_resolve(root, DEFAULT_CORE_DIR),
        output_dir=_resolve(root, DEFAULT_OUTPUT_DIR),
    )


def load_config(config_path: Path) -> CatalogConfig:
    """Load configuration from disk, falling back to the default layout."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = default_config(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    components_dir = _as_str(data.get("components_dir"))
    if components_dir:
        config.components_dir = _resolve(root, components_dir)
    core_dir = _as_str(data.get("core_dir"))
    if core_dir:
        config.core_dir = _resolve(root, core_dir)
    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = _resolve(root, output_dir)

    report_data = _as_dict(data.get("report"))
    report_file = _as_str(report_data.get("file"))
    templates_dir = _as_str(report_data.get("templates_dir"))
    config.report = ReportConfig(
        file=_resolve(root, report_file) if report_file else None,
        templates_dir=_resolve(root, templates_dir) if templates_dir else None,
    )
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _resolve(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


__all__ = ["CONFIG_FILENAME", "CatalogConfig", "ConfigError", "ReportConfig", "default_config", "load_config"]
