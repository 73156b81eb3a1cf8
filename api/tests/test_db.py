"""Test database configuration and schema constraints."""

from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from greenacre import settings
from greenacre.db import create_db_engine, get_database_url
from greenacre.models import Farm, FarmPlot, Inventory, InventoryItem, Item, ItemType, User

DB_VARS = ("DATABASE_URL", "DB_USER", "DB_PASSWORD", "DB_DATABASE", "DB_HOST", "DB_PORT")


@pytest.fixture
def clean_db_env(monkeypatch):
    for name in DB_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGetDatabaseUrl:
    def test_explicit_url_wins(self, clean_db_env):
        clean_db_env.setenv("DATABASE_URL", "sqlite:///explicit.db")
        clean_db_env.setenv("DB_USER", "ignored")
        assert get_database_url() == "sqlite:///explicit.db"

    def test_built_from_components(self, clean_db_env):
        clean_db_env.setenv("DB_USER", "farmer")
        clean_db_env.setenv("DB_PASSWORD", "p@ss:word")
        clean_db_env.setenv("DB_DATABASE", "greenacre")
        assert (
            get_database_url()
            == "postgresql+psycopg://farmer:p%40ss%3Aword@db:5432/greenacre"
        )

    def test_host_and_port(self, clean_db_env):
        clean_db_env.setenv("DB_USER", "farmer")
        clean_db_env.setenv("DB_PASSWORD", "secret")
        clean_db_env.setenv("DB_DATABASE", "greenacre")
        clean_db_env.setenv("DB_HOST", "localhost")
        clean_db_env.setenv("DB_PORT", "6543")
        assert get_database_url().endswith("@localhost:6543/greenacre")

    def test_missing_config_raises(self, clean_db_env):
        clean_db_env.setenv("DB_USER", "farmer")
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            get_database_url()


class TestSettings:
    def test_environment_normalized(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", " Production ")
        assert settings.environment() == "production"

    def test_environment_default(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        assert settings.environment() == "development"

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("no", False), ("", False)])
    def test_allow_production(self, monkeypatch, raw, expected):
        monkeypatch.setenv("SEED_ALLOW_PRODUCTION", raw)
        assert settings.seed_allow_production() is expected

    def test_bad_rounds_fall_back(self, monkeypatch):
        monkeypatch.setenv("SEED_BCRYPT_ROUNDS", "lots")
        assert settings.seed_bcrypt_rounds() == 10


def test_sqlite_foreign_keys_enabled(engine):
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_engine_echo_follows_log_level(monkeypatch, database_url):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    engine = create_db_engine(database_url)
    try:
        assert engine.echo is True
    finally:
        engine.dispose()


class TestConstraints:
    """Invariants the schema enforces on its own."""

    def _user(self, db: Session) -> User:
        user = User(email="farmer@example.com", username="farmer", password_hash="x")
        db.add(user)
        db.flush()
        return user

    def test_duplicate_item_name(self, db: Session):
        db.add(Item(name="Stone", type=ItemType.MATERIAL, base_price=10))
        db.flush()
        db.add(Item(name="Stone", type=ItemType.MATERIAL, base_price=12))
        with pytest.raises(IntegrityError):
            db.flush()

    def test_base_price_positive(self, db: Session):
        db.add(Item(name="Dirt", type=ItemType.MATERIAL, base_price=0))
        with pytest.raises(IntegrityError):
            db.flush()

    def test_inventory_slot_unique(self, db: Session):
        user = self._user(db)
        stone = Item(name="Stone", type=ItemType.MATERIAL, base_price=10)
        inventory = Inventory(user_id=user.id, max_slots=5)
        db.add_all([stone, inventory])
        db.flush()
        db.add(InventoryItem(inventory_id=inventory.id, item_id=stone.id, position=0))
        db.flush()
        db.add(InventoryItem(inventory_id=inventory.id, item_id=stone.id, position=0))
        with pytest.raises(IntegrityError):
            db.flush()

    def test_plot_requires_farm(self, db: Session):
        db.add(FarmPlot(farm_id=9999, position=0))
        with pytest.raises(IntegrityError):
            db.flush()

    def test_one_farm_per_user(self, db: Session):
        user = self._user(db)
        db.add(Farm(user_id=user.id, name="A"))
        db.flush()
        db.add(Farm(user_id=user.id, name="B"))
        with pytest.raises(IntegrityError):
            db.flush()
