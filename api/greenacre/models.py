from __future__ import annotations

from enum import Enum

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from .db import Base


class ItemType(str, Enum):
    """Item category."""
    SEED = "SEED"
    TOOL = "TOOL"
    CROP = "CROP"
    MATERIAL = "MATERIAL"
    POTION = "POTION"


class Rarity(str, Enum):
    """Item rarity tier."""
    COMMON = "COMMON"
    UNCOMMON = "UNCOMMON"
    RARE = "RARE"


# ============================================================================
# CORE ENTITIES
# ============================================================================


class User(Base):
    """Player account. Owns one character, one inventory and one farm."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)  # bcrypt, never plaintext

    # Timestamps
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())

    # Relationships
    character = relationship("Character", back_populates="user", uselist=False)
    inventory = relationship("Inventory", back_populates="user", uselist=False)
    farm = relationship("Farm", back_populates="user", uselist=False)


class Character(Base):
    """In-game character with progression stats."""

    __tablename__ = "characters"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    name = Column(String(50), nullable=False)
    level = Column(Integer, nullable=False, default=1)
    experience = Column(Integer, nullable=False, default=0)
    energy = Column(Integer, nullable=False, default=100)
    max_energy = Column(Integer, nullable=False, default=100)
    coins = Column(Integer, nullable=False, default=100)

    # Skills
    farming_level = Column(Integer, nullable=False, default=1)
    mining_level = Column(Integer, nullable=False, default=1)
    fishing_level = Column(Integer, nullable=False, default=1)
    combat_level = Column(Integer, nullable=False, default=1)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    user = relationship("User", back_populates="character")


# ============================================================================
# ITEMS & INVENTORY
# ============================================================================


class Item(Base):
    """Catalog entry describing an item type. Name is the natural key."""

    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    type = Column(SAEnum(ItemType, name="item_type"), nullable=False, index=True)
    rarity = Column(
        SAEnum(Rarity, name="rarity"), nullable=False, default=Rarity.COMMON
    )
    base_price = Column(Integer, nullable=False)
    stackable = Column(Boolean, nullable=False, default=True)

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        CheckConstraint("base_price > 0", name="ck_items_base_price_positive"),
    )


class Inventory(Base):
    """A user's bag of item slots."""

    __tablename__ = "inventories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    max_slots = Column(Integer, nullable=False, default=20)

    user = relationship("User", back_populates="inventory")
    items = relationship(
        "InventoryItem",
        back_populates="inventory",
        order_by="InventoryItem.position",
    )


class InventoryItem(Base):
    """A stack of one item occupying one inventory slot."""

    __tablename__ = "inventory_items"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    inventory_id = Column(
        Integer, ForeignKey("inventories.id"), nullable=False, index=True
    )
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    position = Column(Integer, nullable=False)  # zero-based slot index

    inventory = relationship("Inventory", back_populates="items")
    item = relationship("Item")

    __table_args__ = (
        UniqueConstraint("inventory_id", "position", name="uq_inventory_items_slot"),
        CheckConstraint("quantity >= 1", name="ck_inventory_items_qty_pos"),
        CheckConstraint("position >= 0", name="ck_inventory_items_position_nonneg"),
    )


# ============================================================================
# FARMING
# ============================================================================


class Farm(Base):
    """A user's farm. Holds exactly max_plots plots."""

    __tablename__ = "farms"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    level = Column(Integer, nullable=False, default=1)
    max_plots = Column(Integer, nullable=False, default=9)

    user = relationship("User", back_populates="farm")
    plots = relationship(
        "FarmPlot", back_populates="farm", order_by="FarmPlot.position"
    )


class FarmPlot(Base):
    """A single tillable plot on a farm."""

    __tablename__ = "farm_plots"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    farm_id = Column(Integer, ForeignKey("farms.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    water_level = Column(Integer, nullable=False, default=0)
    is_watered = Column(Boolean, nullable=False, default=False)

    farm = relationship("Farm", back_populates="plots")

    __table_args__ = (
        UniqueConstraint("farm_id", "position", name="uq_farm_plots_position"),
        CheckConstraint("position >= 0", name="ck_farm_plots_position_nonneg"),
        CheckConstraint("water_level >= 0", name="ck_farm_plots_water_nonneg"),
    )


# ============================================================================
# SOCIAL & MARKET
# ============================================================================


class MarketListing(Base):
    """Item offered for sale by a user."""

    __tablename__ = "market_listings"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    seller_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    price = Column(Integer, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class ChatMessage(Base):
    """Chat line posted by a user."""

    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    channel = Column(String(50), nullable=False, default="global")
    content = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), index=True
    )
