"""Chapter-by-chapter progression projection."""

import logging
import math
from typing import Optional

from litsim.config import DEFAULT_STORY_LENGTH
from litsim.engine.stat_calculator import StatCalculator, round_half_up
from litsim.errors import InvalidArgument, InvalidSettings
from litsim.helpers.debug import log_call
from litsim.models.progression import (
    CharacterSnapshot,
    LevelingCurve,
    Milestone,
    ProgressionSettings,
    ProgressionSnapshot,
    ProgressionSummary,
)

logger = logging.getLogger(__name__)

# Index order is stable: the same index always maps to the same skill
SKILL_CATALOG = (
    "Sword Mastery",
    "Shield Block",
    "Fireball",
    "Healing Light",
    "Stealth",
    "Lockpicking",
    "Archery",
    "Dual Wielding",
    "Berserker Rage",
    "Meditation",
    "Crafting",
    "Alchemy",
    "Intimidation",
    "Persuasion",
    "Acrobatics",
    "Climb",
    "Swimming",
    "Survival",
)

FEATURE_TABLE = (
    (5, "Extra Attack"),
    (10, "Action Surge"),
    (15, "Improved Critical"),
    (20, "Legendary Actions"),
    (25, "Mythic Powers"),
    (30, "Divine Ascension"),
)


class ProgressionProjector:
    """Projects a character's growth across the chapters of a story."""

    @staticmethod
    def required_experience(level: int, curve: LevelingCurve) -> int:
        """
        Experience needed to advance from the given level.

        Args:
            level: Current level
            curve: Leveling curve

        Returns:
            XP threshold for the next level-up
        """
        if curve == LevelingCurve.EXPONENTIAL:
            return math.floor(1000 * 1.2 ** (level - 1))
        if curve == LevelingCurve.LOGARITHMIC:
            return math.floor(1000 * math.log(level + 1) * 500)
        return 1000 * level

    @staticmethod
    def validate(character: CharacterSnapshot, story_length: int, settings: ProgressionSettings) -> None:
        """Reject inputs that would make the level-up loop unsound."""
        if story_length < 1:
            raise InvalidArgument(f"story_length must be at least 1, got {story_length}")
        if not math.isfinite(character.experience):
            raise InvalidArgument(f"character experience must be finite, got {character.experience}")
        for name in ("experience_rate", "stat_growth_rate", "skill_unlock_rate"):
            value = getattr(settings, name)
            if not math.isfinite(value):
                raise InvalidSettings(f"{name} must be finite, got {value}")
        if settings.experience_rate <= 0:
            raise InvalidSettings(f"experience_rate must be positive, got {settings.experience_rate}")
        if settings.stat_growth_rate <= 0:
            raise InvalidSettings(f"stat_growth_rate must be positive, got {settings.stat_growth_rate}")
        if settings.skill_unlock_rate < 0:
            raise InvalidSettings(f"skill_unlock_rate must not be negative, got {settings.skill_unlock_rate}")
        # Every curve grows with level, so the starting threshold is the smallest one
        threshold = ProgressionProjector.required_experience(character.level, settings.leveling_curve)
        if threshold <= 0:
            raise InvalidSettings(
                f"{settings.leveling_curve.value} curve yields a non-positive threshold ({threshold}) "
                f"at level {character.level}"
            )

    @staticmethod
    @log_call
    def project(
        character: CharacterSnapshot,
        story_length: int = DEFAULT_STORY_LENGTH,
        settings: Optional[ProgressionSettings] = None,
    ) -> list[ProgressionSnapshot]:
        """
        Run the projection.

        Args:
            character: Starting character state
            story_length: Number of chapters to project (>= 1)
            settings: Progression settings (defaults when omitted)

        Returns:
            One snapshot per chapter, in chapter order

        Raises:
            InvalidArgument: story_length < 1
            InvalidSettings: unsound rates or leveling curve
        """
        settings = settings or ProgressionSettings()
        ProgressionProjector.validate(character, story_length, settings)

        level = character.level
        experience = character.experience
        stats = StatCalculator.with_derived(character.stats, level)
        growth = round_half_up(1 * settings.stat_growth_rate)
        achieved: set[str] = set()
        snapshots: list[ProgressionSnapshot] = []

        for chapter in range(1, story_length + 1):
            experience += settings.experience_rate

            required = ProgressionProjector.required_experience(level, settings.leveling_curve)
            while experience >= required:
                experience -= required
                level += 1
                stats = StatCalculator.grow(stats, growth, level)
                required = ProgressionProjector.required_experience(level, settings.leveling_curve)

            milestones = ProgressionProjector.check_milestones(level, chapter, settings.custom_milestones)
            new_milestones = [name for name in milestones if name not in achieved]
            achieved.update(new_milestones)

            snapshots.append(
                ProgressionSnapshot(
                    level=level,
                    chapter=chapter,
                    experience=experience,
                    stats=stats,
                    skills_unlocked=ProgressionProjector.skills_for_level(level, settings.skill_unlock_rate),
                    features_unlocked=ProgressionProjector.features_for_level(level),
                    milestones=milestones,
                    new_milestones=new_milestones,
                )
            )

        logger.debug(
            "Projected %d chapters for %r: level %d -> %d",
            story_length,
            character.name,
            character.level,
            level,
        )
        return snapshots

    @staticmethod
    def skills_for_level(level: int, rate: float) -> list[str]:
        """First floor(level * rate) skills of the catalog."""
        count = math.floor(level * rate)
        return list(SKILL_CATALOG[: min(count, len(SKILL_CATALOG))])

    @staticmethod
    def features_for_level(level: int) -> list[str]:
        """Features whose level threshold has been reached."""
        return [feature for threshold, feature in FEATURE_TABLE if level >= threshold]

    @staticmethod
    def check_milestones(level: int, chapter: int, milestones: list[Milestone]) -> list[str]:
        """
        Names of milestones whose level or chapter trigger is met.

        Evaluated independently each chapter, so a milestone stays listed in
        every later chapter once triggered.
        """
        return [
            milestone.name
            for milestone in milestones
            if (milestone.trigger_level is not None and level >= milestone.trigger_level)
            or (milestone.trigger_chapter is not None and chapter >= milestone.trigger_chapter)
        ]

    @staticmethod
    def apply(character: CharacterSnapshot, snapshot: ProgressionSnapshot) -> CharacterSnapshot:
        """
        Commit a previewed snapshot to the character.

        Args:
            character: Character the projection started from
            snapshot: Snapshot chosen by the writer

        Returns:
            New CharacterSnapshot with level, experience and stats replaced and
            unlocked skills merged in
        """
        skills = list(character.skills)
        skills.extend(skill for skill in snapshot.skills_unlocked if skill not in character.skills)
        return character.model_copy(
            update={
                "level": snapshot.level,
                "experience": snapshot.experience,
                "stats": snapshot.stats,
                "skills": skills,
            }
        )

    @staticmethod
    def summarize(snapshots: list[ProgressionSnapshot], starting_level: Optional[int] = None) -> ProgressionSummary:
        """
        Headline numbers for a projection.

        Args:
            snapshots: Output of project()
            starting_level: Level before chapter 1; defaults to chapter 1's level

        Returns:
            ProgressionSummary
        """
        if not snapshots:
            raise InvalidArgument("Cannot summarize an empty projection")

        first_level = starting_level if starting_level is not None else snapshots[0].level
        level_up_chapters = []
        previous = first_level
        for snapshot in snapshots:
            if snapshot.level > previous:
                level_up_chapters.append(snapshot.chapter)
            previous = snapshot.level

        return ProgressionSummary(
            final_level=snapshots[-1].level,
            levels_gained=snapshots[-1].level - first_level,
            max_level=max(snapshot.level for snapshot in snapshots),
            max_experience=max(snapshot.experience for snapshot in snapshots),
            level_up_chapters=level_up_chapters,
        )
