"""
Perfect Outcome Model

Chance that an automated minigame resolution counts as perfect.
The random draw is always passed in so results are reproducible.
"""

import math

from core.state import MotionClass

BASE_CHANCE = {
    MotionClass.DART: 5,
    MotionClass.SMOOTH: 90,
    MotionClass.FLOATER_OR_SINKER: 22,
    MotionClass.OTHER: 54,
}

# Difficulty curve constants
CURVE_OFFSET = -3.72
CURVE_SCALE = 123.0
CURVE_MIDPOINT = 44.29
CURVE_EXPONENT = 2.11


def base_chance(motion_class: MotionClass, is_boss: bool) -> int:
    """Base perfect chance (0-100) for a motion pattern; bosses get a fifth, rounded up"""
    value = BASE_CHANCE[motion_class]
    if is_boss:
        value = math.ceil(value / 5)
    return value


def difficulty_multiplier(difficulty: float) -> float:
    """Decreasing curve, ~1.19 at difficulty 0 and tending to -0.0372"""
    ratio = max(0.0, float(difficulty)) / CURVE_MIDPOINT
    return (CURVE_OFFSET + CURVE_SCALE / (1 + ratio ** CURVE_EXPONENT)) / 100


def perfect_chance(motion_class: MotionClass, is_boss: bool, difficulty: float) -> float:
    """Final chance in [0, 100]"""
    chance = base_chance(motion_class, is_boss) * difficulty_multiplier(difficulty)
    return min(100.0, max(0.0, chance))


def is_perfect(motion_class: MotionClass, is_boss: bool, difficulty: float,
               force_perfect: bool, draw: float) -> bool:
    """
    Decide whether an automated catch is perfect.

    Args:
        motion_class: Fish movement pattern
        is_boss: Boss (legendary) fish flag
        difficulty: Host difficulty value
        force_perfect: Configuration demands a guaranteed perfect
        draw: Uniform draw in [0, 100), clamped if outside

    Returns:
        True if the catch is perfect
    """
    if force_perfect:
        return True
    draw = min(100.0, max(0.0, float(draw)))
    return draw <= perfect_chance(motion_class, is_boss, difficulty)


def draw_percent(rng) -> float:
    """Uniform draw in [0, 100) from an injected random.Random"""
    return rng.random() * 100
