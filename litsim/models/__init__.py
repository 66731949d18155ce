"""Data models module for litsim."""

# Stats
from litsim.models.stats import AttributeBlock, CombatStats

# Progression
from litsim.models.progression import (
    CharacterSnapshot,
    LevelingCurve,
    Milestone,
    ProgressionSettings,
    ProgressionSnapshot,
    ProgressionSummary,
)

# Combat
from litsim.models.combat import (
    BalanceRecommendation,
    CombatAction,
    CombatOutcome,
    CombatStatistics,
    DamageType,
)

# Loot
from litsim.models.loot import (
    BalanceAnalysis,
    BalanceIssue,
    ExpectedValue,
    GeneratedItem,
    LootEntry,
    LootEntryType,
    LootRarity,
    LootStatistics,
    LootTable,
    QuantityRange,
    RollResult,
)

__all__ = [
    # Stats
    "AttributeBlock",
    "CombatStats",
    # Progression
    "CharacterSnapshot",
    "LevelingCurve",
    "Milestone",
    "ProgressionSettings",
    "ProgressionSnapshot",
    "ProgressionSummary",
    # Combat
    "BalanceRecommendation",
    "CombatAction",
    "CombatOutcome",
    "CombatStatistics",
    "DamageType",
    # Loot
    "BalanceAnalysis",
    "BalanceIssue",
    "ExpectedValue",
    "GeneratedItem",
    "LootEntry",
    "LootEntryType",
    "LootRarity",
    "LootStatistics",
    "LootTable",
    "QuantityRange",
    "RollResult",
]
