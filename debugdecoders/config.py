"""Configuration loading for debug-decoders (.debug-decoders.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .assembler.constants import DEFAULT_MODULE_NAME
from .signatures import DEFAULT_DECODER_TYPE, DEFAULT_VIEW_TYPE

CONFIG_FILENAME = ".debug-decoders.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where the generated module goes and what it is called."""

    filename: str = f"{DEFAULT_MODULE_NAME}.elm"
    module_name: str = DEFAULT_MODULE_NAME


@dataclass
class TypesConfig:
    """Qualified type names used to recognise decoders and views."""

    decoder: str = DEFAULT_DECODER_TYPE
    view: str = DEFAULT_VIEW_TYPE


@dataclass
class ExtractorConfig:
    """Interface extraction command and the manifest it requires."""

    executable: str = "elm-interface-to-json"
    manifest: str = "elm-package.json"


@dataclass
class DebugDecodersConfig:
    """Represents the settings defined in .debug-decoders.yml."""

    root: Path
    output: OutputConfig = field(default_factory=OutputConfig)
    types: TypesConfig = field(default_factory=TypesConfig)
    extractor: ExtractorConfig = field(default_factory=ExtractorConfig)
    exclude_modules: List[str] = field(default_factory=list)
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> DebugDecodersConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DebugDecodersConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        output.filename = _as_str(output_data.get("filename")) or output.filename
        output.module_name = _as_str(output_data.get("module_name")) or output.module_name
        if "filename" not in output_data and "module_name" in output_data:
            output.filename = f"{output.module_name}.elm"

    types = TypesConfig()
    types_data = _as_dict(data.get("types"))
    if types_data:
        types.decoder = _as_str(types_data.get("decoder")) or types.decoder
        types.view = _as_str(types_data.get("view")) or types.view

    extractor = ExtractorConfig()
    extractor_data = _as_dict(data.get("extractor"))
    if extractor_data:
        extractor.executable = _as_str(extractor_data.get("executable")) or extractor.executable
        extractor.manifest = _as_str(extractor_data.get("manifest")) or extractor.manifest

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    return DebugDecodersConfig(
        root=root,
        output=output,
        types=types,
        extractor=extractor,
        exclude_modules=_as_str_list(data.get("exclude_modules")),
        templates_dir=templates_dir,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
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


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


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
    "DebugDecodersConfig",
    "ExtractorConfig",
    "OutputConfig",
    "TypesConfig",
    "load_config",
]
