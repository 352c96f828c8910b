from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from QueryTranslator.config.backend import BackendConfig, check_backend, load_backend
from QueryTranslator.config.fields import FieldsConfig, check_fields, load_fields
from QueryTranslator.config.runtime import RuntimeConfig, check_runtime, load_runtime

_SECTIONS = {"log", "fields", "backend"}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    fields: FieldsConfig = field(default_factory=FieldsConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If config values are invalid or unknown sections exist.
    """
    unknown = {str(k) for k in raw.keys()} - _SECTIONS
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")

    runtime = load_runtime(raw)
    fields = load_fields(raw)
    backend = load_backend(raw)

    check_runtime(runtime)
    check_fields(fields)
    check_backend(backend)

    config = AppConfig(runtime=runtime, fields=fields, backend=backend)
    check_cross_domain(config)
    return config


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path, default_path: Path = Path("config/default.yml")
) -> AppConfig:
    """Load config by merging defaults and optional override.

    A missing default file is treated as empty, so built-in defaults apply.
    """
    base: dict[str, Any] = {}
    if default_path.is_file():
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def check_cross_domain(config: AppConfig) -> None:
    """Validate cross-domain constraints."""
    if config.fields.text == config.fields.year:
        raise ValueError("fields.text and fields.year must name different fields")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
