"""Combat action and outcome models."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class DamageType(str, Enum):
    """Damage types. Everything except physical belongs to the magical family."""

    PHYSICAL = "physical"
    MAGICAL = "magical"
    FIRE = "fire"
    ICE = "ice"
    LIGHTNING = "lightning"
    POISON = "poison"

    @property
    def is_physical(self) -> bool:
        return self is DamageType.PHYSICAL


class CombatAction(BaseModel):
    """Designer-authored combat action."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)  # Immutable, finite numbers only

    name: str = Field(default="", description="Action name")
    base_damage: float = Field(ge=0, description="Base damage before stat bonus")
    damage_type: DamageType = Field(default=DamageType.PHYSICAL, description="Damage type")
    accuracy: float = Field(default=0, description="Accuracy contributed by the action (percent)")
    crit_chance: float = Field(default=0, description="Critical chance contributed by the action (percent)")
    crit_multiplier: float = Field(ge=0, default=1.5, description="Damage multiplier on a critical")
    energy_cost: float = Field(ge=0, default=0, description="Energy spent per use")
    cooldown: float = Field(ge=0, default=0, description="Turns before the action can be reused")


class CombatOutcome(BaseModel):
    """Result of resolving one action. Diagnostics are for display only."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    hit: bool = Field(description="Whether the action hit")
    damage: int = Field(ge=0, description="Damage dealt (0 on a miss)")
    critical: bool = Field(default=False, description="Whether the hit was critical")

    base_damage: Optional[float] = Field(default=None, description="Damage before reduction")
    damage_reduction: Optional[float] = Field(
        default=None, ge=0, description="Fraction of damage absorbed by defense"
    )
    hit_chance: Optional[float] = Field(default=None, description="Hit chance used (percent)")
    crit_chance: Optional[float] = Field(default=None, description="Crit chance used (percent)")


class CombatStatistics(BaseModel):
    """Aggregate of a Monte Carlo batch of resolutions."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    total_simulations: int = Field(ge=1, description="Number of trials")
    hits: int = Field(ge=0, description="Trials that hit")
    misses: int = Field(ge=0, description="Trials that missed")
    criticals: int = Field(ge=0, description="Trials that were critical hits")
    average_damage: float = Field(ge=0, description="Mean damage over all trials, misses as 0")
    max_damage: int = Field(ge=0, description="Largest damage among hits")
    min_damage: int = Field(ge=0, description="Smallest damage among hits")
    hit_rate_pct: float = Field(ge=0, le=100, description="Hit rate (percent)")
    crit_rate_pct: float = Field(ge=0, le=100, description="Critical rate (percent)")
    sample_outcome: CombatOutcome = Field(description="First outcome of the batch")


class BalanceRecommendation(BaseModel):
    """Static, non-random balance metrics for an action."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    dps: float = Field(description="Base damage per turn including cooldown")
    dps_with_crit: float = Field(description="DPS weighted by expected critical bonus")
    resource_efficiency: Optional[float] = Field(
        default=None, description="Damage per energy point (None without an energy cost)"
    )
    dps_rating: Literal["low", "medium", "high"] = Field(description="DPS label")
    efficiency_rating: Optional[Literal["inefficient", "fair", "efficient"]] = Field(
        default=None, description="Efficiency label (None without an energy cost)"
    )
    suggestions: list[str] = Field(default_factory=list, description="Designer hints")
