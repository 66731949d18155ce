"""Simulation engine package."""

from litsim.engine.combat import CombatResolver
from litsim.engine.dice import DiceRoller, RandomSource
from litsim.engine.loot import LootRoller
from litsim.engine.progression import ProgressionProjector
from litsim.engine.stat_calculator import StatCalculator

__all__ = [
    "CombatResolver",
    "DiceRoller",
    "LootRoller",
    "ProgressionProjector",
    "RandomSource",
    "StatCalculator",
]
