from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import ItemType, Rarity


# ============================================================================
# CATALOG
# ============================================================================


class ItemDefinition(BaseModel):
    """One catalog item to insert at seed time."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    type: ItemType
    rarity: Rarity = Rarity.COMMON
    base_price: int = Field(gt=0)
    stackable: bool = True


# ============================================================================
# SAMPLE ACCOUNT
# ============================================================================


class SampleAccount(BaseModel):
    """Login credentials of the seeded test user."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(min_length=3, max_length=255)
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, repr=False)


class CharacterDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=50)
    level: int = Field(default=1, ge=1)
    experience: int = Field(default=0, ge=0)
    energy: int = Field(default=100, ge=0)
    max_energy: int = Field(default=100, ge=0)
    coins: int = Field(default=100, ge=0)
    farming_level: int = Field(default=1, ge=1)
    mining_level: int = Field(default=1, ge=1)
    fishing_level: int = Field(default=1, ge=1)
    combat_level: int = Field(default=1, ge=1)


class StartingItem(BaseModel):
    """Catalog item (by name) placed into a fixed inventory slot."""

    model_config = ConfigDict(frozen=True)

    name: str
    position: int = Field(ge=0)
    quantity: int = Field(default=1, ge=1)


class InventoryDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_slots: int = Field(default=20, ge=1)
    starting_items: tuple[StartingItem, ...] = ()

    @model_validator(mode="after")
    def check_positions(self) -> "InventoryDefaults":
        seen: set[int] = set()
        for entry in self.starting_items:
            if entry.position >= self.max_slots:
                raise ValueError(
                    f"Starting item {entry.name!r} at position {entry.position} "
                    f"exceeds max_slots={self.max_slots}"
                )
            if entry.position in seen:
                raise ValueError(f"Duplicate starting item position {entry.position}")
            seen.add(entry.position)
        return self


class FarmDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=100)
    level: int = Field(default=1, ge=1)
    max_plots: int = Field(default=9, ge=0)


# ============================================================================
# AGGREGATE
# ============================================================================


class SeedData(BaseModel):
    """Everything the seed runner inserts, as declarative data."""

    model_config = ConfigDict(frozen=True)

    items: tuple[ItemDefinition, ...]
    account: SampleAccount
    character: CharacterDefaults
    inventory: InventoryDefaults
    farm: FarmDefaults
