"""Stat calculation system."""

import math

from litsim.models.stats import AttributeBlock

BASE_ATTRIBUTES = ("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


class StatCalculator:
    """Computes derived attributes (hit points, mana, armor class)."""

    @staticmethod
    def hit_points(constitution: int, level: int) -> int:
        return max(1, constitution * 10 + level * 5)

    @staticmethod
    def mana_points(intelligence: int, level: int) -> int:
        return max(0, intelligence * 8 + level * 3)

    @staticmethod
    def armor_class(dexterity: int) -> int:
        return 10 + math.floor((dexterity - 10) / 2)

    @staticmethod
    def with_derived(stats: AttributeBlock, level: int) -> AttributeBlock:
        """
        Recompute derived values for the given level.

        Args:
            stats: Attribute block whose base attributes are current
            level: Character level the derived values are computed for

        Returns:
            New AttributeBlock with hit points, mana and armor class recomputed
        """
        return stats.model_copy(
            update={
                "hit_points": StatCalculator.hit_points(stats.constitution, level),
                "mana_points": StatCalculator.mana_points(stats.intelligence, level),
                "armor_class": StatCalculator.armor_class(stats.dexterity),
            }
        )

    @staticmethod
    def grow(stats: AttributeBlock, growth: int, level: int) -> AttributeBlock:
        """
        Add growth to every base attribute, then recompute derived values.

        Args:
            stats: Current attributes
            growth: Points added to each base attribute
            level: New level after the level-up

        Returns:
            New AttributeBlock
        """
        grown = stats.model_copy(
            update={name: getattr(stats, name) + growth for name in BASE_ATTRIBUTES}
        )
        return StatCalculator.with_derived(grown, level)
