"""
Eligibility Gate

Decides whether automation may bypass the minigame for a fish kind,
based on how often the player has already caught it.
"""

from typing import NamedTuple, Tuple


class EligibilityThresholds(NamedTuple):
    """Minimum history required before the minigame can be skipped"""

    min_catch: int = 3
    min_perfect: int = 0

    @classmethod
    def create(cls, min_catch, min_perfect) -> "EligibilityThresholds":
        """Build thresholds from config values, clamping negatives to zero"""
        return cls(max(0, int(min_catch)), max(0, int(min_perfect)))


def is_eligible(stats, fish: str, thresholds: EligibilityThresholds) -> bool:
    return (
        stats.total(fish) >= thresholds.min_catch
        and stats.perfect_total(fish) >= thresholds.min_perfect
    )


def deficit(stats, fish: str, thresholds: EligibilityThresholds) -> Tuple[int, int]:
    """How many more (catches, perfect catches) are needed, never negative"""
    return (
        max(0, thresholds.min_catch - stats.total(fish)),
        max(0, thresholds.min_perfect - stats.perfect_total(fish)),
    )
