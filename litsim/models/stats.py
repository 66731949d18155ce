"""Character attribute and combat stat models."""

from pydantic import BaseModel, ConfigDict, Field


class AttributeBlock(BaseModel):
    """Six base attributes plus the values derived from them and the level."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    strength: int = Field(ge=0, default=10, description="Strength attribute")
    dexterity: int = Field(ge=0, default=10, description="Dexterity attribute")
    constitution: int = Field(ge=0, default=10, description="Constitution attribute")
    intelligence: int = Field(ge=0, default=10, description="Intelligence attribute")
    wisdom: int = Field(ge=0, default=10, description="Wisdom attribute")
    charisma: int = Field(ge=0, default=10, description="Charisma attribute")

    # Derived - recomputed by StatCalculator.with_derived() on every level change
    hit_points: int = Field(ge=1, default=1, description="Derived hit points")
    mana_points: int = Field(ge=0, default=0, description="Derived mana points")
    armor_class: int = Field(default=10, description="Derived armor class")


class CombatStats(BaseModel):
    """Combat stat block for an attacker or defender."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)  # Immutable, finite numbers only

    health: float = Field(default=100, description="Health points")
    energy: float = Field(default=50, description="Energy available for actions")
    attack: float = Field(ge=0, default=15, description="Physical attack power")
    defense: float = Field(ge=0, default=10, description="Physical defense")
    magic_power: float = Field(ge=0, default=12, description="Magical attack power")
    magic_defense: float = Field(ge=0, default=8, description="Magical defense")
    speed: float = Field(default=10, description="Speed")
    # Percentage-like scalars, deliberately not capped at 100
    accuracy: float = Field(default=85, description="Accuracy bonus (percent)")
    evasion: float = Field(default=15, description="Evasion (percent)")
    critical_rate: float = Field(default=5, description="Critical rate bonus (percent)")
    critical_damage: float = Field(ge=0, default=150, description="Critical damage (percent)")
