"""Simulation runtime configuration."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from litsim.config import (
    DEFAULT_COMBAT_TRIALS,
    DEFAULT_LOOT_TRIALS,
    DEFAULT_MAX_STORY_LENGTH,
    DEFAULT_MAX_TRIALS,
    DEFAULT_RANDOM_SEED,
    DEFAULT_STORY_LENGTH,
)
from litsim.engine.dice import DiceRoller


class SimulationConfig(BaseModel):
    """Batch sizes and seeding used by the API."""

    combat_trials: int = Field(
        default=DEFAULT_COMBAT_TRIALS, ge=1, description="Default trials for combat batches"
    )
    loot_trials: int = Field(default=DEFAULT_LOOT_TRIALS, ge=1, description="Default trials for loot batches")
    story_length: int = Field(default=DEFAULT_STORY_LENGTH, ge=1, description="Default chapters to project")
    max_trials: int = Field(default=DEFAULT_MAX_TRIALS, ge=1, description="Largest batch a request may ask for")
    max_story_length: int = Field(
        default=DEFAULT_MAX_STORY_LENGTH, ge=1, description="Longest projection a request may ask for"
    )
    seed: Optional[int] = Field(
        default=DEFAULT_RANDOM_SEED, description="Seed for requests that do not send one (None = entropy)"
    )

    @model_validator(mode="after")
    def check_defaults_within_limit(self) -> "SimulationConfig":
        """Defaults must not exceed the request limits."""
        if max(self.combat_trials, self.loot_trials) > self.max_trials:
            raise ValueError("Default trial counts must not exceed max_trials")
        if self.story_length > self.max_story_length:
            raise ValueError("Default story_length must not exceed max_story_length")
        return self

    def make_roller(self, seed: Optional[int] = None) -> DiceRoller:
        """Random source for one request, preferring the request's own seed."""
        return DiceRoller(seed if seed is not None else self.seed)


class SimulationConfigManager:
    """Manages simulation configuration."""

    def __init__(self, initial_config: Optional[SimulationConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or SimulationConfig()

    @property
    def config(self) -> SimulationConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: SimulationConfig) -> None:
        """Update configuration."""
        self._config = new_config
