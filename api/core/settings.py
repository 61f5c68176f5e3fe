"""
Environment-driven settings.

Every helper falls back to its default when the variable is unset or invalid.
"""

from __future__ import annotations

import os

DEFAULT_EDITOR_ROLES = ("admin", "editor")
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def _env_list(name: str, default: tuple[str, ...]) -> list[str]:
    raw = os.environ.get(name, "")
    items = [part.strip() for part in raw.split(",") if part.strip()]
    return items or list(default)


def seed_demo() -> bool:
    return _env_bool("CONTENT_SEED_DEMO", True)


def editor_roles() -> list[str]:
    return _env_list("CONTENT_EDITOR_ROLES", DEFAULT_EDITOR_ROLES)


def cors_allow_origins() -> list[str]:
    return _env_list("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def loader_max_batch_size() -> int | None:
    size = _env_int("LOADER_MAX_BATCH_SIZE", None)
    if size is not None and size <= 0:
        return None
    return size


def host() -> str:
    return os.environ.get("HOST", "127.0.0.1").strip() or "127.0.0.1"


def port() -> int:
    return _env_int("PORT", 8000) or 8000
