"""Progression projection models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from litsim.config import (
    DEFAULT_EXPERIENCE_RATE,
    DEFAULT_LEVELING_CURVE,
    DEFAULT_SKILL_UNLOCK_RATE,
    DEFAULT_STAT_GROWTH_RATE,
)
from litsim.models.stats import AttributeBlock


class LevelingCurve(str, Enum):
    """Shape of the experience-per-level requirement."""

    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    LOGARITHMIC = "logarithmic"


class Milestone(BaseModel):
    """Designer-authored story milestone."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Milestone name")
    description: str = Field(default="", description="Milestone description")
    trigger_level: Optional[int] = Field(default=None, ge=1, description="Level that triggers the milestone")
    trigger_chapter: Optional[int] = Field(
        default=None, ge=1, description="Chapter that triggers the milestone"
    )


class ProgressionSettings(BaseModel):
    """Knobs for a progression projection.

    Rate constraints are checked by the projector so that unsound values
    surface as InvalidSettings rather than a generic validation error.
    """

    model_config = ConfigDict(frozen=True)  # Immutable model

    experience_rate: float = Field(default=DEFAULT_EXPERIENCE_RATE, description="XP granted per chapter")
    leveling_curve: LevelingCurve = Field(
        default=LevelingCurve(DEFAULT_LEVELING_CURVE), description="Leveling curve"
    )
    stat_growth_rate: float = Field(
        default=DEFAULT_STAT_GROWTH_RATE, description="Multiplier on the +1 per level attribute gain"
    )
    skill_unlock_rate: float = Field(
        default=DEFAULT_SKILL_UNLOCK_RATE, description="Skills unlocked per level (fractional)"
    )
    custom_milestones: list[Milestone] = Field(default_factory=list, description="Custom milestones")


class CharacterSnapshot(BaseModel):
    """Character state a projection starts from."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(default="", description="Character name")
    level: int = Field(ge=1, default=1, description="Character level")
    experience: float = Field(ge=0, default=0, description="Experience toward the next level")
    stats: AttributeBlock = Field(default_factory=AttributeBlock, description="Attributes")
    skills: list[str] = Field(default_factory=list, description="Skill names already known")


class ProgressionSnapshot(BaseModel):
    """Projected character state at the end of one chapter."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    level: int = Field(ge=1, description="Level at chapter end")
    chapter: int = Field(ge=1, description="Chapter number (1-based)")
    experience: float = Field(ge=0, description="Experience remaining after level-ups")
    stats: AttributeBlock = Field(description="Attributes at chapter end")
    skills_unlocked: list[str] = Field(default_factory=list, description="Unlocked skills")
    features_unlocked: list[str] = Field(default_factory=list, description="Unlocked class features")
    milestones: list[str] = Field(
        default_factory=list, description="Every milestone whose trigger is met this chapter"
    )
    new_milestones: list[str] = Field(
        default_factory=list, description="Milestones reached for the first time this chapter"
    )


class ProgressionSummary(BaseModel):
    """Headline numbers of a projection."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    final_level: int = Field(ge=1, description="Level after the last chapter")
    levels_gained: int = Field(ge=0, description="Levels gained over the story")
    max_level: int = Field(ge=1, description="Highest level reached")
    max_experience: float = Field(ge=0, description="Highest leftover experience in any chapter")
    level_up_chapters: list[int] = Field(
        default_factory=list, description="Chapters in which at least one level was gained"
    )
