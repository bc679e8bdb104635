"""
Fishing State Definitions

Enumerations shared by the catch statistics, outcome model and bite timer.
"""

from enum import Enum, IntEnum, auto


class CatchCircumstance(IntEnum):
    """How a catch attempt resolved.

    The integer value is the slot index in a persisted count list.
    """

    MANUAL_NORMAL = 0     # Player beat the minigame, not perfect
    ASSISTED_NORMAL = 1   # Automation resolved the minigame, not perfect
    MANUAL_PERFECT = 2    # Player beat the minigame perfectly
    ASSISTED_PERFECT = 3  # Automation resolved the minigame perfectly
    MISSED = 4            # Fish got away

    def __str__(self):
        return self.name.title().replace("_", " ")

    @property
    def is_catch(self):
        """Returns True for every circumstance except MISSED"""
        return self is not CatchCircumstance.MISSED

    @property
    def is_perfect(self):
        return self in (CatchCircumstance.MANUAL_PERFECT, CatchCircumstance.ASSISTED_PERFECT)

    @classmethod
    def for_catch(cls, perfect: bool, assisted: bool) -> "CatchCircumstance":
        """Pick the bucket for a successful catch"""
        if perfect:
            return cls.ASSISTED_PERFECT if assisted else cls.MANUAL_PERFECT
        return cls.ASSISTED_NORMAL if assisted else cls.MANUAL_NORMAL


class MotionClass(Enum):
    """Fish movement pattern inside the minigame"""

    DART = auto()
    SMOOTH = auto()
    FLOATER_OR_SINKER = auto()
    OTHER = auto()

    @classmethod
    def from_motion_type(cls, motion_type) -> "MotionClass":
        """Map the host's integer motion type (1 dart, 2 smooth, 3/4 floater/sinker)"""
        if motion_type == 1:
            return cls.DART
        if motion_type == 2:
            return cls.SMOOTH
        if motion_type in (3, 4):
            return cls.FLOATER_OR_SINKER
        return cls.OTHER


class BiteTimerPhase(Enum):
    """Bite timer coordinator states"""

    IDLE = auto()       # No bite pending
    EXTENDED = auto()   # Host countdown pushed out by the buffer
    TRIGGERED = auto()  # Hook fired for this cycle

    def __str__(self):
        return self.name.title()
