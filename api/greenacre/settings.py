"""Centralized environment-driven settings.

Keep this module lightweight: stdlib only, no package imports, to avoid circular deps.
"""

from __future__ import annotations

import os


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def environment() -> str:
    """Deployment environment name, lowercased ("development", "production", ...)."""
    return os.getenv("ENVIRONMENT", "development").strip().lower()


def seed_allow_production() -> bool:
    """Explicit opt-in for running the destructive seed against production."""
    return _bool_env("SEED_ALLOW_PRODUCTION")


def seed_bcrypt_rounds() -> int:
    # Configured via .env: SEED_BCRYPT_ROUNDS=10
    return _int_env("SEED_BCRYPT_ROUNDS", 10)


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
