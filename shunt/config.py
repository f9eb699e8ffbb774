"""SHUNT FILE PURPOSE
Purpose: environment configuration helpers (safe defaults).
Hot path: yes (read-only env lookups; lightweight).
Feature flags: SHUNT_DEBUG, SHUNT_FEATURE_ADMIN.
Failure mode: safe defaults when unset.
"""

from __future__ import annotations

import os

DEFAULT_DB_PATH = "ops/shunt.sqlite3"
STORE_BACKENDS = ("sqlite", "memory")


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in ("1", "true", "yes", "on")


def is_debug() -> bool:
    return env_flag("SHUNT_DEBUG", "0")


def admin_enabled() -> bool:
    return env_flag("SHUNT_FEATURE_ADMIN", "0")


def db_path() -> str:
    return (os.getenv("SHUNT_DB_PATH") or DEFAULT_DB_PATH).strip()


def store_backend() -> str:
    return (os.getenv("SHUNT_STORE") or "sqlite").strip().lower()


def admin_api_key() -> str | None:
    key = os.getenv("SHUNT_ADMIN_API_KEY", "").strip()
    return key or None


def log_level() -> str | None:
    level = os.getenv("SHUNT_LOG_LEVEL", "").strip().upper()
    return level or None
