"""Configuration models and data structures."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from config.config import (
    BACKEND_URL_ENV,
    CONFIG_PATH,
    DEFAULT_BACKEND_URL,
    DOTENV_PATH,
    LEGACY_BACKEND_URL_ENV,
    LOG_FILE,
    LOG_LEVEL,
    REQUEST_TIMEOUT_S,
)
from utils.io import maybe_load_yaml


def _env_backend_url() -> str:
    url = os.getenv(BACKEND_URL_ENV) or os.getenv(LEGACY_BACKEND_URL_ENV) or DEFAULT_BACKEND_URL
    return url.strip().rstrip("/")


@dataclass
class DashboardConfig:
    """Configuration for the dashboard client."""
    base_url: str = DEFAULT_BACKEND_URL
    request_timeout_s: Optional[float] = REQUEST_TIMEOUT_S
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = LOG_FILE
    source: dict = field(default_factory=dict)  # where each value came from, for the About panel

    @classmethod
    def from_env(
        cls,
        yaml_path: Optional[str | Path] = None,
        dotenv_path: Optional[str | Path] = DOTENV_PATH,
    ) -> 'DashboardConfig':
        """Build the config once at startup.

        The backend URL comes from the environment (after loading ``.env``
        if present). Timeout and logging options may be overridden from the
        ``dashboard`` section of a YAML file; an unreadable file is ignored.
        """
        if dotenv_path and Path(dotenv_path).exists():
            load_dotenv(dotenv_path, override=False)

        if yaml_path is None and CONFIG_PATH.exists():
            yaml_path = CONFIG_PATH
        yaml_config = maybe_load_yaml(str(yaml_path) if yaml_path else None)
        section = yaml_config.get('dashboard', {}) if isinstance(yaml_config, dict) else {}
        if not isinstance(section, dict):
            section = {}

        source = {
            'base_url': 'env' if (os.getenv(BACKEND_URL_ENV) or os.getenv(LEGACY_BACKEND_URL_ENV)) else 'default',
            'request_timeout_s': 'yaml' if 'request_timeout_s' in section else 'default',
            'log_level': 'yaml' if 'log_level' in section else 'default',
        }

        return cls(
            base_url=_env_backend_url(),
            request_timeout_s=section.get('request_timeout_s', REQUEST_TIMEOUT_S),
            log_level=str(section.get('log_level', LOG_LEVEL)).upper(),
            log_file=section.get('log_file', LOG_FILE),
            source=source,
        )
