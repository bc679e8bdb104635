"""
BiteTimerCoordinator - Auto Hook Race Guard

The host counts down "time until bite" on its own per-frame update while the
automation tick runs at a different cadence. Reacting to the host's native
timer can fire the hook twice or after the host already reset.

The coordinator pushes the host countdown out by a buffer so the host never
reaches it, remembers the original budget, and fires the hook itself once the
host's elapsed accumulator passes that original budget.

Usage:
    coordinator = BiteTimerCoordinator(buffer_ms=5000)
    decision = coordinator.tick(rod.time_until_bite, rod.bite_accumulator)
    rod.time_until_bite = decision.countdown
    if decision.reset_elapsed:
        rod.bite_accumulator = 0
    if decision.fire_hook:
        ...
"""

import logging
from typing import NamedTuple, Optional

from core.exceptions import ConfigError
from core.state import BiteTimerPhase

logger = logging.getLogger("FishingTweaks")

NO_BITE = -1.0  # Host sentinel: no bite pending
DEFAULT_BUFFER_MS = 5000.0


class BiteDecision(NamedTuple):
    """What the caller must write back to the host after a tick"""

    countdown: float
    reset_elapsed: bool = False
    nibbling: bool = False
    fire_hook: bool = False


def is_pending(countdown) -> bool:
    return countdown is not None and countdown != NO_BITE


class BiteTimerCoordinator:
    """Extend-then-realign state machine for the bite countdown"""

    def __init__(self, buffer_ms: float = DEFAULT_BUFFER_MS):
        if buffer_ms is None or buffer_ms < 0:
            raise ConfigError(f"Bite buffer must be non-negative, got {buffer_ms}")
        self._buffer = float(buffer_ms)
        self._phase = BiteTimerPhase.IDLE
        self._original_budget: Optional[float] = None
        self._extended = False

    @property
    def buffer(self) -> float:
        return self._buffer

    @property
    def phase(self) -> BiteTimerPhase:
        return self._phase

    @property
    def original_budget(self) -> Optional[float]:
        """Countdown before extension, None when unset"""
        return self._original_budget

    @property
    def extended(self) -> bool:
        return self._extended

    def reset(self):
        """Back to IDLE, dropping any captured budget"""
        if self._phase is not BiteTimerPhase.IDLE:
            self._set_phase(BiteTimerPhase.IDLE)
        self._original_budget = None
        self._extended = False

    def tick(self, countdown: float, elapsed: float) -> BiteDecision:
        """
        Advance the state machine with the host's current timer values.

        Args:
            countdown: Host "time until bite" (NO_BITE when none pending)
            elapsed: Host bite accumulator for the current cycle

        Returns:
            BiteDecision to apply to the host
        """
        if not is_pending(countdown):
            # Bite resolved by any path, including the player
            self.reset()
            return BiteDecision(NO_BITE)

        if self._phase is BiteTimerPhase.TRIGGERED:
            logger.debug("Bite pending again without a reset; starting a new cycle")
            self.reset()

        if self._phase is BiteTimerPhase.IDLE:
            self._original_budget = float(countdown)
            self._extended = True
            self._set_phase(BiteTimerPhase.EXTENDED)
            countdown = countdown + self._buffer

        # Same pass as the extension: a coarse first tick may already be late
        if elapsed > self._original_budget:
            self._original_budget = None
            self._extended = False
            self._set_phase(BiteTimerPhase.TRIGGERED)
            return BiteDecision(NO_BITE, reset_elapsed=True, nibbling=True, fire_hook=True)

        return BiteDecision(countdown)

    def _set_phase(self, new_phase: BiteTimerPhase):
        old_phase = self._phase
        self._phase = new_phase
        logger.debug(f"Bite timer: {old_phase} -> {new_phase}")
