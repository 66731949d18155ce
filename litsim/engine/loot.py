"""Weighted loot rolling and batch analysis."""

import logging
import math
import time
from collections import Counter
from typing import Optional

import numpy as np

from litsim.config import DEFAULT_LOOT_TRIALS
from litsim.engine.dice import DiceRoller, RandomSource, default_source
from litsim.errors import InvalidArgument
from litsim.helpers.debug import log_call
from litsim.models.loot import (
    BalanceAnalysis,
    BalanceIssue,
    ExpectedValue,
    GeneratedItem,
    LootEntry,
    LootEntryType,
    LootStatistics,
    LootTable,
    RollResult,
)

logger = logging.getLogger(__name__)

# Placeholder valuation, not rarity-aware
VALUE_PER_UNIT = 10

BASE_BALANCE_SCORE = 75
STINGY_NOTHING_PCT = 50
STINGY_PENALTY = 20
GENEROUS_NOTHING_PCT = 10
GENEROUS_BONUS = 10

WEIGHT_RECOMMENDATION = "Consider adjusting probability weights for better balance"


class LootRoller:
    """Rolls loot tables and analyzes batches of rolls."""

    @staticmethod
    def validate(table: LootTable) -> None:
        """Reject tables with non-finite or negative weights, or inverted quantity ranges."""
        for index, entry in enumerate(table.entries):
            if not math.isfinite(entry.weight):
                raise InvalidArgument(f"Entry {index} ({entry.name!r}) has non-finite weight {entry.weight}")
            if entry.weight < 0:
                raise InvalidArgument(f"Entry {index} ({entry.name!r}) has negative weight {entry.weight}")
            if entry.quantity.min > entry.quantity.max:
                raise InvalidArgument(
                    f"Entry {index} ({entry.name!r}) has quantity min {entry.quantity.min} "
                    f"above max {entry.quantity.max}"
                )
        if not math.isfinite(table.total_weight):
            raise InvalidArgument(f"Table {table.name!r} has non-finite total weight")

    @staticmethod
    def is_degenerate(table: LootTable) -> bool:
        """True when nothing can be selected (total weight is zero)."""
        return table.total_weight <= 0

    @staticmethod
    def select(entries: list[LootEntry], total_weight: float, rng: RandomSource) -> int:
        """
        Linear-scan weighted pick.

        Args:
            entries: Entries in table order
            total_weight: Sum of entry weights (> 0)
            rng: Random source

        Returns:
            Index of the first entry whose cumulative weight reaches the draw
        """
        target = DiceRoller.uniform(rng, total_weight)
        cumulative = 0.0
        for index, entry in enumerate(entries):
            cumulative += entry.weight
            # Zero-weight entries are never picked, even on a draw of exactly 0
            if entry.weight > 0 and cumulative >= target:
                return index
        # Float rounding can leave the draw just above the running sum
        return max(index for index, entry in enumerate(entries) if entry.weight > 0)

    @staticmethod
    def roll(table: LootTable, rng: Optional[RandomSource] = None) -> RollResult:
        """
        Roll the table once.

        Args:
            table: Loot table
            rng: Random source (fresh DiceRoller when omitted)

        Returns:
            RollResult; empty when the table's total weight is zero

        Raises:
            InvalidArgument: non-finite or negative weight, or inverted quantity range
        """
        LootRoller.validate(table)
        if LootRoller.is_degenerate(table):
            logger.warning("Loot table %r has no weight; returning an empty roll", table.name)
        return LootRoller._roll(table, default_source(rng))

    @staticmethod
    def _roll(table: LootTable, rng: RandomSource) -> RollResult:
        start = time.perf_counter()
        if LootRoller.is_degenerate(table):
            return RollResult(roll_time=(time.perf_counter() - start) * 1000)

        index = LootRoller.select(table.entries, table.total_weight, rng)
        entry = table.entries[index]
        items = []
        if entry.type != LootEntryType.NOTHING:
            quantity = DiceRoller.randint(rng, entry.quantity.min, entry.quantity.max)
            items.append(
                GeneratedItem(
                    name=entry.name,
                    quantity=quantity,
                    rarity=entry.rarity,
                    value=quantity * VALUE_PER_UNIT,
                    source=entry.entry_id or entry.name,
                )
            )

        return RollResult(
            items=items,
            total_value=sum(item.value for item in items),
            roll_time=(time.perf_counter() - start) * 1000,
            selected_index=index,
        )

    @staticmethod
    @log_call
    def analyze(
        table: LootTable,
        trials: int = DEFAULT_LOOT_TRIALS,
        rng: Optional[RandomSource] = None,
    ) -> tuple[LootStatistics, BalanceAnalysis]:
        """
        Roll the table `trials` times and summarize.

        Args:
            table: Loot table
            trials: Number of rolls (>= 1)
            rng: Random source shared by every roll

        Returns:
            Tuple of (LootStatistics, BalanceAnalysis)

        Raises:
            InvalidArgument: trials < 1, bad weight or inverted quantity range
        """
        if trials < 1:
            raise InvalidArgument(f"trials must be at least 1, got {trials}")
        LootRoller.validate(table)
        if LootRoller.is_degenerate(table):
            logger.warning("Loot table %r has no weight; every roll will be empty", table.name)
        rng = default_source(rng)

        results = [LootRoller._roll(table, rng) for _ in range(trials)]
        statistics = LootRoller.statistics(results)
        analysis = LootRoller.balance(statistics)
        logger.debug(
            "Analyzed %r x%d: avg value %.2f, nothing %.1f%%, score %d",
            table.name,
            trials,
            statistics.average_value,
            statistics.nothing_percentage,
            analysis.balance_score,
        )
        return statistics, analysis

    @staticmethod
    def statistics(results: list[RollResult]) -> LootStatistics:
        """
        Descriptive statistics over roll results.

        The median is the upper-middle element for an even number of rolls,
        and the standard deviation is the population one.
        """
        if not results:
            raise InvalidArgument("Cannot compute statistics without rolls")

        values = np.sort(np.array([result.total_value for result in results], dtype=np.float64))
        roll_times = np.array([result.roll_time for result in results], dtype=np.float64)
        nothing_count = sum(1 for result in results if not result.items)
        rarities = Counter(item.rarity for result in results for item in result.items)

        return LootStatistics(
            average_value=float(values.mean()),
            median_value=float(values[len(values) // 2]),
            standard_deviation=float(values.std()),
            min_value=float(values[0]),
            max_value=float(values[-1]),
            nothing_percentage=nothing_count / len(results) * 100,
            average_roll_time=float(roll_times.mean()),
            rarity_distribution=dict(rarities),
        )

    @staticmethod
    def balance(statistics: LootStatistics) -> BalanceAnalysis:
        """Heuristic balance score driven by how often a roll yields nothing."""
        score = BASE_BALANCE_SCORE
        issues = []
        if statistics.nothing_percentage > STINGY_NOTHING_PCT:
            score -= STINGY_PENALTY
            issues.append(
                BalanceIssue(
                    type="too_stingy",
                    severity="high",
                    description=f"{statistics.nothing_percentage:.1f}% of rolls produce nothing",
                )
            )
        if statistics.nothing_percentage < GENEROUS_NOTHING_PCT:
            score += GENEROUS_BONUS
            if statistics.nothing_percentage == 0:
                issues.append(
                    BalanceIssue(
                        type="too_generous",
                        severity="low",
                        description="Every roll produces loot",
                    )
                )

        return BalanceAnalysis(balance_score=score, issues=issues, recommendations=[WEIGHT_RECOMMENDATION])

    @staticmethod
    def expected_value(table: LootTable) -> ExpectedValue:
        """
        Closed-form expectation of a single roll.

        Args:
            table: Loot table

        Returns:
            ExpectedValue (all zeros for a degenerate table)
        """
        LootRoller.validate(table)
        total_weight = table.total_weight
        if total_weight <= 0:
            return ExpectedValue(average_value=0, average_item_count=0)

        average_value = 0.0
        average_item_count = 0.0
        rarity_distribution: dict = {}
        type_distribution: dict = {}
        for entry in table.entries:
            probability = entry.weight / total_weight
            type_distribution[entry.type] = type_distribution.get(entry.type, 0.0) + probability
            if entry.type == LootEntryType.NOTHING:
                continue
            mean_quantity = (entry.quantity.min + entry.quantity.max) / 2
            average_value += probability * mean_quantity * VALUE_PER_UNIT
            average_item_count += probability
            rarity_distribution[entry.rarity] = rarity_distribution.get(entry.rarity, 0.0) + probability

        return ExpectedValue(
            average_value=average_value,
            average_item_count=average_item_count,
            rarity_distribution=rarity_distribution,
            type_distribution=type_distribution,
        )
