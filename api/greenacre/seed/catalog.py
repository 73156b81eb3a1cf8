"""Reference seed data: item catalog, sample account, starting inventory and farm."""

from __future__ import annotations

from ..models import ItemType, Rarity
from ..schemas import (
    CharacterDefaults,
    FarmDefaults,
    InventoryDefaults,
    ItemDefinition,
    SampleAccount,
    SeedData,
    StartingItem,
)

ITEM_CATALOG: tuple[ItemDefinition, ...] = (
    # Seeds
    ItemDefinition(
        name="Carrot Seeds",
        description="Plant these to grow carrots.",
        type=ItemType.SEED,
        rarity=Rarity.COMMON,
        base_price=20,
        stackable=True,
    ),
    ItemDefinition(
        name="Tomato Seeds",
        description="Plant these to grow tomatoes.",
        type=ItemType.SEED,
        rarity=Rarity.COMMON,
        base_price=25,
        stackable=True,
    ),
    ItemDefinition(
        name="Golden Seeds",
        description="Rare seeds that grow into valuable crops.",
        type=ItemType.SEED,
        rarity=Rarity.RARE,
        base_price=100,
        stackable=True,
    ),
    # Tools
    ItemDefinition(
        name="Basic Hoe",
        description="A simple tool for tilling soil.",
        type=ItemType.TOOL,
        rarity=Rarity.COMMON,
        base_price=50,
        stackable=False,
    ),
    ItemDefinition(
        name="Basic Watering Can",
        description="Used to water your crops.",
        type=ItemType.TOOL,
        rarity=Rarity.COMMON,
        base_price=40,
        stackable=False,
    ),
    ItemDefinition(
        name="Basic Pickaxe",
        description="For mining resources.",
        type=ItemType.TOOL,
        rarity=Rarity.COMMON,
        base_price=60,
        stackable=False,
    ),
    # Crops
    ItemDefinition(
        name="Carrot",
        description="A fresh, crunchy carrot.",
        type=ItemType.CROP,
        rarity=Rarity.COMMON,
        base_price=40,
        stackable=True,
    ),
    ItemDefinition(
        name="Tomato",
        description="A ripe, juicy tomato.",
        type=ItemType.CROP,
        rarity=Rarity.COMMON,
        base_price=45,
        stackable=True,
    ),
    # Materials
    ItemDefinition(
        name="Stone",
        description="Basic building material.",
        type=ItemType.MATERIAL,
        rarity=Rarity.COMMON,
        base_price=10,
        stackable=True,
    ),
    ItemDefinition(
        name="Copper Ore",
        description="Can be refined into copper bars.",
        type=ItemType.MATERIAL,
        rarity=Rarity.UNCOMMON,
        base_price=30,
        stackable=True,
    ),
    ItemDefinition(
        name="Iron Ore",
        description="Can be refined into iron bars.",
        type=ItemType.MATERIAL,
        rarity=Rarity.UNCOMMON,
        base_price=50,
        stackable=True,
    ),
    # Potions
    ItemDefinition(
        name="Energy Potion",
        description="Restores 50 energy.",
        type=ItemType.POTION,
        rarity=Rarity.UNCOMMON,
        base_price=100,
        stackable=True,
    ),
    ItemDefinition(
        name="Experience Potion",
        description="Grants 100 experience points.",
        type=ItemType.POTION,
        rarity=Rarity.RARE,
        base_price=200,
        stackable=True,
    ),
)

# Tools go in singly, seeds come in stacks of five
STARTING_ITEMS: tuple[StartingItem, ...] = (
    StartingItem(name="Basic Hoe", position=0),
    StartingItem(name="Basic Watering Can", position=1),
    StartingItem(name="Basic Pickaxe", position=2),
    StartingItem(name="Carrot Seeds", position=3, quantity=5),
    StartingItem(name="Tomato Seeds", position=4, quantity=5),
)

SAMPLE_ACCOUNT = SampleAccount(
    email="test@example.com",
    username="testuser",
    password="password123",
)

SAMPLE_CHARACTER = CharacterDefaults(
    name="TestCharacter",
    level=1,
    experience=0,
    energy=100,
    max_energy=100,
    coins=100,
)

SAMPLE_INVENTORY = InventoryDefaults(max_slots=20, starting_items=STARTING_ITEMS)

SAMPLE_FARM = FarmDefaults(name="Test Farm", level=1, max_plots=9)


def default_seed_data() -> SeedData:
    """The full reference data set used by `python -m greenacre.seed`."""
    return SeedData(
        items=ITEM_CATALOG,
        account=SAMPLE_ACCOUNT,
        character=SAMPLE_CHARACTER,
        inventory=SAMPLE_INVENTORY,
        farm=SAMPLE_FARM,
    )
