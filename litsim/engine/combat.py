"""Single-action combat resolution and Monte Carlo aggregation."""

import logging
from typing import Optional

import numpy as np

from litsim.config import DEFAULT_COMBAT_TRIALS
from litsim.engine.dice import DiceRoller, RandomSource, default_source
from litsim.engine.stat_calculator import round_half_up
from litsim.errors import InvalidArgument
from litsim.helpers.debug import log_call
from litsim.models.combat import (
    BalanceRecommendation,
    CombatAction,
    CombatOutcome,
    CombatStatistics,
)
from litsim.models.stats import CombatStats

logger = logging.getLogger(__name__)

# Designer-facing cut points
HIGH_DPS_THRESHOLD = 15
MEDIUM_DPS_THRESHOLD = 10
EFFICIENT_THRESHOLD = 2
FAIR_THRESHOLD = 1.5


class CombatResolver:
    """Resolves combat actions and summarizes batches of resolutions."""

    @staticmethod
    def damage_reduction(defense: float) -> float:
        """Diminishing-returns reduction: approaches but never reaches 1."""
        return defense / (defense + 100)

    @staticmethod
    def resolve(
        action: CombatAction,
        attacker: CombatStats,
        defender: CombatStats,
        rng: Optional[RandomSource] = None,
    ) -> CombatOutcome:
        """
        Resolve one use of an action.

        Args:
            action: Action being used
            attacker: Attacker's stats
            defender: Defender's stats
            rng: Random source (fresh DiceRoller when omitted)

        Returns:
            CombatOutcome
        """
        rng = default_source(rng)

        if action.damage_type.is_physical:
            base_damage = action.base_damage + attacker.attack * 0.5
            defense = defender.defense
        else:
            base_damage = action.base_damage + attacker.magic_power * 0.5
            defense = defender.magic_defense

        reduction = CombatResolver.damage_reduction(defense)
        final_damage = base_damage * (1 - reduction)

        hit_chance = action.accuracy + attacker.accuracy - defender.evasion
        hit = DiceRoller.percent(rng) < hit_chance
        if not hit:
            return CombatOutcome(hit=False, damage=0, critical=False, hit_chance=hit_chance)

        crit_chance = action.crit_chance + attacker.critical_rate
        critical = DiceRoller.percent(rng) < crit_chance
        if critical:
            final_damage *= action.crit_multiplier * (attacker.critical_damage / 100)

        return CombatOutcome(
            hit=True,
            damage=round_half_up(final_damage),
            critical=critical,
            base_damage=base_damage,
            damage_reduction=reduction,
            hit_chance=hit_chance,
            crit_chance=crit_chance,
        )

    @staticmethod
    @log_call
    def simulate(
        action: CombatAction,
        attacker: CombatStats,
        defender: CombatStats,
        trials: int = DEFAULT_COMBAT_TRIALS,
        rng: Optional[RandomSource] = None,
    ) -> CombatStatistics:
        """
        Resolve the action `trials` times independently and summarize.

        Args:
            action: Action being used
            attacker: Attacker's stats
            defender: Defender's stats
            trials: Number of independent resolutions (>= 1)
            rng: Random source shared by every trial

        Returns:
            CombatStatistics

        Raises:
            InvalidArgument: trials < 1
        """
        if trials < 1:
            raise InvalidArgument(f"trials must be at least 1, got {trials}")
        rng = default_source(rng)

        outcomes = [CombatResolver.resolve(action, attacker, defender, rng) for _ in range(trials)]

        damage = np.array([outcome.damage for outcome in outcomes], dtype=np.int64)
        hit_mask = np.array([outcome.hit for outcome in outcomes], dtype=bool)
        crit_mask = np.array([outcome.critical for outcome in outcomes], dtype=bool)

        hits = int(np.count_nonzero(hit_mask))
        criticals = int(np.count_nonzero(crit_mask))
        hit_damage = damage[hit_mask]

        statistics = CombatStatistics(
            total_simulations=trials,
            hits=hits,
            misses=trials - hits,
            criticals=criticals,
            average_damage=float(damage.mean()),
            max_damage=int(hit_damage.max()) if hits else 0,
            min_damage=int(hit_damage.min()) if hits else 0,
            hit_rate_pct=hits / trials * 100,
            crit_rate_pct=criticals / trials * 100,
            sample_outcome=outcomes[0],
        )
        logger.debug(
            "Simulated %r x%d: hit %.1f%%, crit %.1f%%, avg %.2f",
            action.name,
            trials,
            statistics.hit_rate_pct,
            statistics.crit_rate_pct,
            statistics.average_damage,
        )
        return statistics

    @staticmethod
    def dps(action: CombatAction) -> float:
        """Base damage spread over the action's cooldown."""
        return action.base_damage / (action.cooldown + 1)

    @staticmethod
    def dps_with_crit(action: CombatAction) -> float:
        """DPS scaled by the expected critical bonus."""
        return CombatResolver.dps(action) * (1 + action.crit_chance / 100 * (action.crit_multiplier - 1))

    @staticmethod
    def resource_efficiency(action: CombatAction) -> Optional[float]:
        """Damage per energy point, or None for actions without an energy cost."""
        if action.energy_cost <= 0:
            return None
        return action.base_damage / action.energy_cost

    @staticmethod
    def recommend(action: CombatAction) -> BalanceRecommendation:
        """
        Static balance labels for an action. Hints only, never gameplay input.

        Args:
            action: Action to rate

        Returns:
            BalanceRecommendation
        """
        dps = CombatResolver.dps(action)
        dps_with_crit = CombatResolver.dps_with_crit(action)
        efficiency = CombatResolver.resource_efficiency(action)
        suggestions = []

        if dps_with_crit > HIGH_DPS_THRESHOLD:
            dps_rating = "high"
            suggestions.append("Consider reducing damage or increasing cooldown")
        elif dps_with_crit > MEDIUM_DPS_THRESHOLD:
            dps_rating = "medium"
        else:
            dps_rating = "low"
            suggestions.append("Consider increasing damage or reducing cooldown")

        efficiency_rating = None
        if efficiency is not None:
            if efficiency > EFFICIENT_THRESHOLD:
                efficiency_rating = "efficient"
            elif efficiency > FAIR_THRESHOLD:
                efficiency_rating = "fair"
            else:
                efficiency_rating = "inefficient"
                suggestions.append("Consider reducing energy cost or increasing damage")

        return BalanceRecommendation(
            dps=dps,
            dps_with_crit=dps_with_crit,
            resource_efficiency=efficiency,
            dps_rating=dps_rating,
            efficiency_rating=efficiency_rating,
            suggestions=suggestions,
        )
