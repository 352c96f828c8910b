"""Search backend configuration (endpoint, index, retries, credentials)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from QueryTranslator.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_section,
    reject_unknown_keys,
)

_KEYS = {"url", "index", "timeout", "max_attempts", "username_env", "password_env"}


@dataclass(frozen=True, slots=True)
class BackendConfig:
    """Store validated search backend settings.

    Credentials are not stored in the config file; ``username_env`` and
    ``password_env`` name the environment variables that hold them.
    """

    url: str = "http://localhost:9200"
    index: str = "query_parser_test"
    timeout: float = 10.0
    max_attempts: int = 4
    username_env: str = "SEARCH_USERNAME"
    password_env: str = "SEARCH_PASSWORD"

    def credentials(self) -> tuple[str, str] | None:
        """Return basic-auth credentials from the environment, if both are set."""
        username = _load_env(self.username_env)
        password = _load_env(self.password_env)
        if username and password:
            return (username, password)
        return None


def load_backend(raw: Mapping[str, Any]) -> BackendConfig:
    """Load the ``backend`` section; missing keys keep their defaults.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the section has unknown keys.
    """
    section = get_section(raw, "backend")
    reject_unknown_keys(section, _KEYS, "backend")
    defaults = BackendConfig()
    return BackendConfig(
        url=expect_str(section.get("url", defaults.url), "backend.url").strip(),
        index=expect_str(section.get("index", defaults.index), "backend.index").strip(),
        timeout=expect_float(section.get("timeout", defaults.timeout), "backend.timeout"),
        max_attempts=expect_int(section.get("max_attempts", defaults.max_attempts), "backend.max_attempts"),
        username_env=expect_str(section.get("username_env", defaults.username_env), "backend.username_env"),
        password_env=expect_str(section.get("password_env", defaults.password_env), "backend.password_env"),
    )


def check_backend(config: BackendConfig) -> None:
    """Validate backend domain constraints.

    Raises:
        ValueError: If values violate backend constraints.
    """
    if not config.url.startswith(("http://", "https://")):
        raise ValueError("backend.url must start with http:// or https://")
    if not config.index:
        raise ValueError("backend.index must not be empty")
    if config.index != config.index.lower():
        raise ValueError("backend.index must be lowercase")
    if config.timeout <= 0:
        raise ValueError("backend.timeout must be positive")
    if config.max_attempts <= 0:
        raise ValueError("backend.max_attempts must be positive")


def _load_env(name: str) -> str:
    """Read a stripped environment variable; an empty name reads nothing."""
    if not name.strip():
        return ""
    return os.getenv(name, "").strip()
