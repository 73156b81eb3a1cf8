"""
Seed runner.

Resets the game tables and repopulates them with the item catalog and one
sample account (character, inventory with starting items, farm with plots).
Destructive: only meant for development and test databases.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ..db import make_session_factory
from ..models import (
    Character,
    ChatMessage,
    Farm,
    FarmPlot,
    Inventory,
    InventoryItem,
    Item,
    MarketListing,
    User,
)
from ..schemas import (
    CharacterDefaults,
    FarmDefaults,
    InventoryDefaults,
    ItemDefinition,
    SampleAccount,
    SeedData,
)
from ..services.passwords import hash_password
from .catalog import default_seed_data

logger = logging.getLogger(__name__)

# Children before parents so no foreign key is left dangling mid-reset
RESET_ORDER = (
    ChatMessage,
    MarketListing,
    InventoryItem,
    Inventory,
    FarmPlot,
    Farm,
    Character,
    Item,
    User,
)


class SeedRefusedError(RuntimeError):
    """Raised when seeding is attempted against a protected environment."""


def ensure_seed_allowed(environment: str, allow_production: bool = False) -> None:
    """
    Refuse to run the destructive seed against production.

    Raises:
        SeedRefusedError: If environment is "production" and no override is set
    """
    if environment.strip().lower() == "production" and not allow_production:
        raise SeedRefusedError(
            "Refusing to seed: ENVIRONMENT=production. "
            "Set SEED_ALLOW_PRODUCTION=true to override."
        )


@dataclass
class SeedResult:
    """Outcome of a seed run."""

    ok: bool
    error: str | None = None
    deleted: dict[str, int] = field(default_factory=dict)
    items_created: int = 0
    starting_items_added: int = 0
    starting_items_skipped: list[str] = field(default_factory=list)
    plots_created: int = 0

    @classmethod
    def failure(cls, detail: str) -> SeedResult:
        return cls(ok=False, error=detail)


def reset_tables(session: Session) -> dict[str, int]:
    """Delete every row from the seeded tables. Returns deleted counts per table."""
    deleted: dict[str, int] = {}
    for model in RESET_ORDER:
        result = session.execute(delete(model))
        deleted[model.__tablename__] = result.rowcount
        logger.debug(f"reset_tables: deleted {result.rowcount} rows from {model.__tablename__}")
    return deleted


def create_items(session: Session, items: tuple[ItemDefinition, ...]) -> dict[str, Item]:
    """
    Insert catalog items one by one.

    Each insert is flushed so a duplicate name fails on the offending item.
    """
    created: dict[str, Item] = {}
    for definition in items:
        item = Item(**definition.model_dump())
        session.add(item)
        session.flush()
        created[item.name] = item
    return created


def find_item_by_name(session: Session, name: str) -> Item | None:
    return session.execute(select(Item).where(Item.name == name)).scalar_one_or_none()


def create_sample_user(
    session: Session, account: SampleAccount, rounds: int | None = None
) -> User:
    user = User(
        email=account.email,
        username=account.username,
        password_hash=hash_password(account.password, rounds=rounds),
    )
    session.add(user)
    session.flush()
    return user


def create_character(session: Session, user: User, defaults: CharacterDefaults) -> Character:
    character = Character(user_id=user.id, **defaults.model_dump())
    session.add(character)
    session.flush()
    return character


def create_inventory(
    session: Session, user: User, defaults: InventoryDefaults
) -> tuple[Inventory, list[str]]:
    """
    Create the user's inventory and fill its starting slots.

    Starting items whose name is not in the catalog are skipped, not fatal.

    Returns:
        (inventory, names of skipped starting items)
    """
    inventory = Inventory(user_id=user.id, max_slots=defaults.max_slots)
    session.add(inventory)
    session.flush()

    skipped: list[str] = []
    for entry in defaults.starting_items:
        item = find_item_by_name(session, entry.name)
        if item is None:
            logger.warning(
                f"create_inventory: starting item {entry.name!r} not in catalog, "
                f"leaving slot {entry.position} empty"
            )
            skipped.append(entry.name)
            continue
        session.add(
            InventoryItem(
                inventory_id=inventory.id,
                item_id=item.id,
                quantity=entry.quantity,
                position=entry.position,
            )
        )
        session.flush()
    return inventory, skipped


def create_farm(session: Session, user: User, defaults: FarmDefaults) -> Farm:
    """Create the user's farm and exactly max_plots dry plots at positions 0..N-1."""
    farm = Farm(
        user_id=user.id,
        name=defaults.name,
        level=defaults.level,
        max_plots=defaults.max_plots,
    )
    session.add(farm)
    session.flush()

    for position in range(defaults.max_plots):
        session.add(
            FarmPlot(farm_id=farm.id, position=position, water_level=0, is_watered=False)
        )
    session.flush()
    return farm


def seed_database(session: Session, data: SeedData, rounds: int | None = None) -> SeedResult:
    """
    Run every seed step inside the caller's transaction.

    Any storage error propagates; the caller decides whether to roll back.
    """
    logger.info("seed_database: Resetting tables...")
    deleted = reset_tables(session)

    logger.info(f"seed_database: Creating {len(data.items)} catalog items...")
    items = create_items(session, data.items)

    logger.info(f"seed_database: Creating sample user {data.account.username!r}...")
    user = create_sample_user(session, data.account, rounds=rounds)
    create_character(session, user, data.character)
    _, skipped = create_inventory(session, user, data.inventory)
    create_farm(session, user, data.farm)

    return SeedResult(
        ok=True,
        deleted=deleted,
        items_created=len(items),
        starting_items_added=len(data.inventory.starting_items) - len(skipped),
        starting_items_skipped=skipped,
        plots_created=data.farm.max_plots,
    )


def run_seed(
    engine: Engine, data: SeedData | None = None, rounds: int | None = None
) -> SeedResult:
    """
    Seed the database behind `engine` in a single transaction.

    Never raises for seeding errors: they are logged and returned as a failed
    SeedResult. The session is always closed; disposing the engine is up to
    the caller.
    """
    if data is None:
        data = default_seed_data()

    session = make_session_factory(engine)()
    try:
        with session.begin():
            result = seed_database(session, data, rounds=rounds)
        logger.info(
            f"run_seed: Completed ({result.items_created} items, "
            f"{result.starting_items_added} starting items, {result.plots_created} plots)."
        )
        return result
    except Exception as e:
        logger.error(f"run_seed: Seeding failed: {e}", exc_info=True)
        return SeedResult.failure(f"{type(e).__name__}: {e}")
    finally:
        session.close()
