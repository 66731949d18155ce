"""Loot table and roll analysis models."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class LootEntryType(str, Enum):
    """What a loot entry produces."""

    ITEM = "item"
    CURRENCY = "currency"
    EXPERIENCE = "experience"
    NOTHING = "nothing"


class LootRarity(str, Enum):
    """Rarity tiers."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    ARTIFACT = "artifact"
    UNIQUE = "unique"


class QuantityRange(BaseModel):
    """Inclusive quantity range. min <= max is checked by the roller."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    min: int = Field(ge=0, default=1, description="Smallest quantity")
    max: int = Field(ge=0, default=1, description="Largest quantity")


class LootEntry(BaseModel):
    """Weighted loot table entry."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(default="", description="Entry name")
    entry_id: Optional[str] = Field(default=None, description="Stable identifier for the entry")
    type: LootEntryType = Field(default=LootEntryType.ITEM, description="Entry type")
    rarity: LootRarity = Field(default=LootRarity.COMMON, description="Rarity")
    quantity: QuantityRange = Field(default_factory=QuantityRange, description="Quantity range")
    # Sign is checked by the roller so negatives raise InvalidArgument
    weight: float = Field(default=1, description="Relative selection weight")


class LootTable(BaseModel):
    """Ordered list of weighted entries."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(default="", description="Table name")
    entries: list[LootEntry] = Field(default_factory=list, description="Entries in table order")

    @computed_field
    def total_weight(self) -> float:
        """Sum of all entry weights."""
        return sum(entry.weight for entry in self.entries)


class GeneratedItem(BaseModel):
    """Item produced by a roll."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Item name")
    quantity: int = Field(ge=0, description="Quantity rolled")
    rarity: LootRarity = Field(description="Rarity")
    value: float = Field(ge=0, description="Scalar value of the stack")
    source: str = Field(default="", description="Entry id (or name) that produced the item")


class RollResult(BaseModel):
    """Outcome of one roll."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    items: list[GeneratedItem] = Field(default_factory=list, description="Items produced")
    total_value: float = Field(ge=0, default=0, description="Sum of item values")
    roll_time: float = Field(ge=0, default=0, description="Wall time of the roll in milliseconds")
    selected_index: Optional[int] = Field(
        default=None, ge=0, description="Index of the selected entry (None for a degenerate table)"
    )


class LootStatistics(BaseModel):
    """Descriptive statistics over a batch of rolls."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    average_value: float = Field(description="Mean total value")
    median_value: float = Field(description="Upper-middle element of the sorted values")
    standard_deviation: float = Field(ge=0, description="Population standard deviation")
    min_value: float = Field(description="Smallest total value")
    max_value: float = Field(description="Largest total value")
    nothing_percentage: float = Field(ge=0, le=100, description="Percent of rolls with no items")
    average_roll_time: float = Field(ge=0, description="Mean roll time in milliseconds")
    rarity_distribution: dict[LootRarity, int] = Field(
        default_factory=dict, description="Items produced per rarity"
    )


class BalanceIssue(BaseModel):
    """Flagged balance concern."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    type: Literal["too_generous", "too_stingy"] = Field(description="Issue kind")
    severity: Literal["low", "medium", "high", "critical"] = Field(description="Severity")
    description: str = Field(description="Human-readable description")


class BalanceAnalysis(BaseModel):
    """Heuristic balance verdict for a loot table."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    balance_score: int = Field(description="Heuristic score, 75 baseline")
    issues: list[BalanceIssue] = Field(default_factory=list, description="Flagged issues")
    recommendations: list[str] = Field(default_factory=list, description="Designer hints")


class ExpectedValue(BaseModel):
    """Closed-form expectation of a single roll."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    average_value: float = Field(ge=0, description="Expected total value per roll")
    average_item_count: float = Field(ge=0, description="Expected number of items per roll")
    rarity_distribution: dict[LootRarity, float] = Field(
        default_factory=dict, description="Selection probability per rarity (non-nothing entries)"
    )
    type_distribution: dict[LootEntryType, float] = Field(
        default_factory=dict, description="Selection probability per entry type"
    )
