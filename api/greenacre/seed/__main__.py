#!/usr/bin/env python3
"""
Database seed script.

Wipes the game tables and inserts the item catalog plus a sample account
(testuser / test@example.com). Never point this at production data.

Usage:
    python -m greenacre.seed

Options:
    --database-url URL  Seed this database instead of DATABASE_URL / DB_* settings
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from .. import settings
from ..db import create_db_engine
from .catalog import default_seed_data
from .runner import SeedRefusedError, ensure_seed_allowed, run_seed

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Database has been seeded with initial game data!"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_REFUSED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greenacre-seed",
        description="Reset the game database and load the starter catalog and test user.",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL to seed (defaults to DATABASE_URL or DB_* variables)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    args = build_parser().parse_args(argv)

    try:
        ensure_seed_allowed(settings.environment(), settings.seed_allow_production())
    except SeedRefusedError as e:
        logger.error(str(e))
        return EXIT_REFUSED

    try:
        engine = create_db_engine(args.database_url)
    except Exception as e:
        logger.error(f"Could not configure database: {e}", exc_info=True)
        return EXIT_FAILED

    try:
        result = run_seed(engine, default_seed_data())
    finally:
        engine.dispose()
        logger.debug("Database engine disposed.")

    if not result.ok:
        print(f"Seeding failed: {result.error}", file=sys.stderr)
        return EXIT_FAILED

    print(SUCCESS_MESSAGE)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
