"""Pytest configuration and fixtures."""

import pytest

from litsim.models.combat import CombatAction, DamageType
from litsim.models.loot import LootEntry, LootEntryType, LootRarity, LootTable, QuantityRange
from litsim.models.progression import CharacterSnapshot, LevelingCurve, ProgressionSettings
from litsim.models.stats import AttributeBlock, CombatStats


class ScriptedSource:
    """Random source that replays fixed draws, cycling when exhausted."""

    def __init__(self, *draws: float) -> None:
        self._draws = list(draws)
        self._index = 0

    def random(self) -> float:
        value = self._draws[self._index % len(self._draws)]
        self._index += 1
        return value


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedSource


@pytest.fixture
def character():
    """Level 1 character with every attribute at 10."""
    return CharacterSnapshot(
        name="Aria",
        level=1,
        experience=0,
        stats=AttributeBlock(
            strength=10, dexterity=10, constitution=10, intelligence=10, wisdom=10, charisma=10
        ),
    )


@pytest.fixture
def linear_settings():
    """Linear curve, one level per chapter at level 1."""
    return ProgressionSettings(
        experience_rate=1000,
        leveling_curve=LevelingCurve.LINEAR,
        stat_growth_rate=1.5,
        skill_unlock_rate=0.5,
    )


@pytest.fixture
def sword_strike():
    """Basic physical attack."""
    return CombatAction(
        name="Sword Strike",
        base_damage=20,
        damage_type=DamageType.PHYSICAL,
        accuracy=10,
        crit_chance=10,
        crit_multiplier=2.0,
        energy_cost=10,
        cooldown=0,
    )


@pytest.fixture
def fireball():
    """Magical-family attack."""
    return CombatAction(
        name="Fireball",
        base_damage=35,
        damage_type=DamageType.FIRE,
        accuracy=5,
        crit_chance=5,
        crit_multiplier=1.5,
        energy_cost=25,
        cooldown=2,
    )


@pytest.fixture
def attacker():
    return CombatStats(
        attack=20, magic_power=30, accuracy=85, evasion=10, critical_rate=5, critical_damage=150
    )


@pytest.fixture
def defender():
    return CombatStats(defense=25, magic_defense=15, evasion=10)


@pytest.fixture
def goblin_table():
    """Three-entry table: gold, a dagger, or nothing."""
    return LootTable(
        name="Goblin",
        entries=[
            LootEntry(
                name="Gold",
                entry_id="gold",
                type=LootEntryType.CURRENCY,
                quantity=QuantityRange(min=1, max=10),
                weight=50,
            ),
            LootEntry(
                name="Rusty Dagger",
                entry_id="dagger",
                type=LootEntryType.ITEM,
                rarity=LootRarity.UNCOMMON,
                quantity=QuantityRange(min=1, max=1),
                weight=20,
            ),
            LootEntry(name="Nothing", entry_id="nothing", type=LootEntryType.NOTHING, weight=30),
        ],
    )
