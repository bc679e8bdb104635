"""
Core Module - Catch Telemetry and Automation Gating

This module holds the host-independent logic of Fishing Tweaks. It owns
catch statistics, the skip-minigame gate, the perfect outcome model and the
bite timer state machine WITHOUT any:
- Host/game object access
- Input handling
- File or database I/O (persistence goes through an injected store)

Components:
    - catch_stats: CatchStatistics (per fish kind counters)
    - eligibility: EligibilityThresholds, is_eligible, deficit
    - outcome: base_chance, difficulty_multiplier, is_perfect
    - bite_timer: BiteTimerCoordinator
    - state: CatchCircumstance, MotionClass, BiteTimerPhase enums
    - exceptions: Custom exceptions

Usage:
    from core import CatchStatistics, CatchCircumstance, EligibilityThresholds

    stats = CatchStatistics(store)
    stats.load()
    stats.incr("150", CatchCircumstance.MANUAL_PERFECT)
    if is_eligible(stats, "150", EligibilityThresholds(3, 1)):
        ...

Design Principles:
    - Dependency injection only (store, random generator)
    - Clamp boundable input instead of raising
    - Deterministic given inputs
"""

from core.state import CatchCircumstance, MotionClass, BiteTimerPhase
from core.exceptions import FishingTweaksException, ConfigError, StatsStoreError
from core.catch_stats import CatchStatistics
from core.eligibility import EligibilityThresholds, is_eligible, deficit
from core.outcome import base_chance, difficulty_multiplier, perfect_chance, is_perfect, draw_percent
from core.bite_timer import BiteTimerCoordinator, BiteDecision, NO_BITE

__all__ = [
    'CatchCircumstance',
    'MotionClass',
    'BiteTimerPhase',
    'FishingTweaksException',
    'ConfigError',
    'StatsStoreError',
    'CatchStatistics',
    'EligibilityThresholds',
    'is_eligible',
    'deficit',
    'base_chance',
    'difficulty_multiplier',
    'perfect_chance',
    'is_perfect',
    'draw_percent',
    'BiteTimerCoordinator',
    'BiteDecision',
    'NO_BITE',
]
