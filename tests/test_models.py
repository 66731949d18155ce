"""Tests for the value-object models."""

import pytest
from pydantic import ValidationError

from litsim.models import (
    AttributeBlock,
    CombatAction,
    CombatStats,
    DamageType,
    LootEntry,
    LootTable,
    Milestone,
    ProgressionSettings,
)


class TestModels:
    """Model construction and immutability."""

    def test_attribute_block_frozen(self):
        stats = AttributeBlock()
        with pytest.raises(ValidationError):
            stats.strength = 20

    def test_attribute_block_rejects_negative(self):
        with pytest.raises(ValidationError):
            AttributeBlock(strength=-1)

    def test_combat_stats_allow_percentages_above_100(self):
        stats = CombatStats(accuracy=250, critical_rate=140, evasion=120, critical_damage=400)
        assert stats.accuracy == 250

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_combat_models_reject_non_finite(self, value):
        with pytest.raises(ValidationError):
            CombatStats(attack=value)
        with pytest.raises(ValidationError):
            CombatAction(name="Void Bolt", base_damage=value)

    def test_combat_stats_reject_negative_defense(self):
        with pytest.raises(ValidationError):
            CombatStats(defense=-5)

    def test_damage_type_family(self):
        assert DamageType.PHYSICAL.is_physical
        assert not DamageType.POISON.is_physical

    def test_action_from_plain_data(self):
        action = CombatAction.model_validate({"base_damage": 12, "damage_type": "lightning"})
        assert action.damage_type is DamageType.LIGHTNING
        assert action.cooldown == 0

    def test_settings_accept_curve_names(self):
        settings = ProgressionSettings.model_validate(
            {"leveling_curve": "logarithmic", "custom_milestones": [{"name": "Boss", "trigger_level": 10}]}
        )
        assert settings.leveling_curve.value == "logarithmic"
        assert settings.custom_milestones == [Milestone(name="Boss", trigger_level=10)]

    def test_milestone_triggers_positive(self):
        with pytest.raises(ValidationError):
            Milestone(name="Prologue", trigger_chapter=0)

    def test_table_round_trip_ignores_computed_weight(self):
        table = LootTable(entries=[LootEntry(name="Gold", weight=3), LootEntry(name="Gem", weight=1)])
        dumped = table.model_dump()
        assert dumped["total_weight"] == 4
        assert LootTable.model_validate(dumped) == table
