"""Database seeding for development and test environments."""

from __future__ import annotations

from .catalog import default_seed_data
from .runner import SeedRefusedError, SeedResult, ensure_seed_allowed, run_seed

__all__ = [
    "SeedRefusedError",
    "SeedResult",
    "default_seed_data",
    "ensure_seed_allowed",
    "run_seed",
]
