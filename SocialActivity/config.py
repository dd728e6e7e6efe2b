#!/usr/bin/env python3

"""Centralized configuration loader for SocialActivity.

Configuration lives in a YAML file and is loaded once per process. Modules
that need settings call `get_config()` and read values with dotted paths.

Load precedence:
- Explicit path provided to `get_config(path)` / `reload_config(path)`
- Environment variable: `SOCIALACTIVITY_CONFIG`
- Default path: `./config.yml`

Recognized sections:

    web:
      base_url: https://social.example.org
    layouts:
      notification:
        web: /srv/theme/layouts/notification.html
    activities:
      comment_created:
        view_path: /srv/theme/views/comment
    smtp: {...}
    email: {...}

Usage:
    from SocialActivity.config import get_config
    base_url = get_config().get('web.base_url')
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


ENV_VAR = "SOCIALACTIVITY_CONFIG"

_LOCK = threading.RLock()
_CONFIG: Optional["Config"] = None
_CONFIG_PATH: Optional[str] = None


@dataclass
class Config:
    """Configuration holder with dotted-path lookup."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, path: str, default: Any = None) -> Any:
        """Get a nested value using dotted path notation.

        Example: cfg.get('layouts.notification.mail')
        """
        cur: Any = self.raw
        for part in path.split('.'):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur

    def section(self, name: str) -> Dict[str, Any]:
        value = self.raw.get(name)
        return value if isinstance(value, dict) else {}


def _resolve_config_path(preferred: Optional[str]) -> str:
    if preferred:
        return str(preferred)
    return os.environ.get(ENV_VAR) or "./config.yml"


def _load_yaml_config(path: str, explicit: bool) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        if explicit:
            raise FileNotFoundError(f"Configuration file not found: {path}")
        # Running without a config file is allowed; every key has a default
        return {}

    with p.open("r") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping (YAML dict)")
        return data


def _load_config(path: Optional[str], refresh: bool = False) -> Config:
    global _CONFIG, _CONFIG_PATH
    with _LOCK:
        if _CONFIG is not None and not refresh:
            return _CONFIG

        resolved = _resolve_config_path(path)
        explicit = path is not None or os.environ.get(ENV_VAR) is not None
        raw = _load_yaml_config(resolved, explicit=explicit)

        _CONFIG = Config(raw=raw)
        _CONFIG_PATH = resolved
        return _CONFIG


def get_config(path: Optional[str] = None) -> Config:
    """Return the process-wide Config instance, loading it if necessary."""
    return _load_config(path, refresh=False)


def reload_config(path: Optional[str] = None) -> Config:
    """Force reload the configuration from the given path or the last one used."""
    target = path if path is not None else _CONFIG_PATH
    return _load_config(target, refresh=True)


def set_config(cfg: Optional[Config]) -> None:
    """Replace the global configuration. Passing None forces a lazy reload."""
    global _CONFIG, _CONFIG_PATH
    with _LOCK:
        _CONFIG = cfg
        if cfg is None:
            _CONFIG_PATH = None
