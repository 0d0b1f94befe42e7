"""Load application settings from config/settings.yaml and .env files."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values

logger = logging.getLogger(__name__)

_DEFAULTS: dict[str, Any] = {
    "api": {
        "base_url": "http://localhost:3000",
        "timeout": 10.0,
        "profile_path": "/api/coaches",
        "invitation_path": "/api/invitations",
    },
    "coach": {
        "id": "coach123",
    },
    "invitation": {
        "link_base": "https://flexsync.com/invite",
    },
    "navigation": {
        "dashboard_route": "/dashboard",
    },
    "logging": {
        "file": "logs/signup.log",
        "level": "INFO",
        "log_to_console": False,
        "max_bytes": 10485760,  # 10 MB
        "backup_count": 3,
    },
}

# Environment variable -> dotted settings path
_ENV_OVERRIDES: dict[str, str] = {
    "FLEXSYNC_API_URL": "api.base_url",
    "FLEXSYNC_COACH_ID": "coach.id",
}

_cached: dict[str, Any] | None = None


def _merged(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """New dict with overlay applied on top of base. Nested sections merge; None is ignored."""
    out = dict(base)
    for key, value in overlay.items():
        if value is None:
            continue
        current = out.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            out[key] = _merged(current, value)
        else:
            out[key] = value
    return out


def get_default_settings() -> dict[str, Any]:
    """Fresh copy of the built-in defaults."""
    return copy.deepcopy(_DEFAULTS)


def get_setting(settings: dict[str, Any], path: str, default: Any = None) -> Any:
    """Read a dotted path such as 'api.base_url'; default when any segment is missing."""
    node: Any = settings
    for key in path.split("."):
        try:
            node = node[key]
        except (KeyError, TypeError):
            return default
    return node


def _apply_env_overrides(settings: dict[str, Any], env_vars: dict[str, str]) -> None:
    for env_key, dotted in _ENV_OVERRIDES.items():
        value = env_vars.get(env_key)
        if not value:
            continue
        *sections, leaf = dotted.split(".")
        node = settings
        for section in sections:
            node = node.setdefault(section, {})
        node[leaf] = value


def reload_settings() -> None:
    """Forget cached settings so the next load_settings() rereads files."""
    global _cached
    _cached = None


def load_env(project_root: Path) -> dict[str, str]:
    """Read .env.<FLEXSYNC_ENV> then .env; process environment wins over both."""
    env_name = os.environ.get("FLEXSYNC_ENV", "development")
    values: dict[str, str] = {}
    for name in (f".env.{env_name}", ".env"):
        path = project_root / name
        if path.exists():
            for k, v in dotenv_values(path).items():
                if v is not None:
                    values.setdefault(k, v)
    for k in _ENV_OVERRIDES:
        if os.environ.get(k):
            values[k] = os.environ[k]
    return values


def _read_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(
    config_dir: Path | None = None,
    env_vars: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Defaults, then config_dir/settings.yaml, then env overrides. Cached."""
    global _cached
    if _cached is None:
        config_dir = config_dir or Path(__file__).resolve().parent.parent / "config"
        settings = _merged(
            get_default_settings(), _read_settings_file(config_dir / "settings.yaml")
        )
        _apply_env_overrides(settings, env_vars or {})
        _cached = settings
    return _cached


def invitation_link(settings: dict[str, Any]) -> str:
    """Shareable invitation URL for the configured coach."""
    base = str(get_setting(settings, "invitation.link_base", "")).rstrip("/")
    coach_id = get_setting(settings, "coach.id", "")
    return f"{base}/{coach_id}"
