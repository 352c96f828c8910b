from __future__ import annotations

"""Public configuration API for QueryTranslator."""

from QueryTranslator.config.app import (
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from QueryTranslator.config.backend import BackendConfig
from QueryTranslator.config.fields import FieldsConfig
from QueryTranslator.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "FieldsConfig",
    "BackendConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "check_cross_domain",
]
