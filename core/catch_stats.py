"""
Catch Statistics

Per fish kind counters bucketed by CatchCircumstance.

Records live in memory and are written through an injected store handle
(see services.StatsStore). The store is only touched by load() and save();
incr() never persists on its own.

Store handle contract:
    load_all() -> dict of {key: list of counts}
    save(key, counts) -> bool
"""

import logging
from typing import Dict, List, Optional, Tuple

from core.state import CatchCircumstance

logger = logging.getLogger("FishingTweaks")

KEY_PREFIX = "FT_"
KEY_SUFFIX = "_FT"
SLOT_COUNT = len(CatchCircumstance)


def store_key(fish: str) -> str:
    """Namespaced store key for a fish kind, keeps clear of unrelated player data"""
    return f"{KEY_PREFIX}{fish}{KEY_SUFFIX}"


def fish_from_key(key) -> Optional[str]:
    """Reverse of store_key(), None for keys this module did not write"""
    if not isinstance(key, str):
        return None
    if len(key) < len(KEY_PREFIX) + len(KEY_SUFFIX):
        return None
    if not (key.startswith(KEY_PREFIX) and key.endswith(KEY_SUFFIX)):
        return None
    return key[len(KEY_PREFIX):len(key) - len(KEY_SUFFIX)]


def normalize_counts(raw) -> List[int]:
    """Coerce a stored count list of any length into SLOT_COUNT non-negative ints

    Missing slots are zero-filled, extra slots are dropped.
    """
    counts = [0] * SLOT_COUNT
    if not isinstance(raw, (list, tuple)):
        return counts
    for i, value in enumerate(raw[:SLOT_COUNT]):
        try:
            counts[i] = max(0, int(value))
        except (TypeError, ValueError):
            counts[i] = 0
    return counts


class CatchStatistics:
    """Durable catch counters keyed by fish kind"""

    def __init__(self, store=None):
        self._store = store
        self._records: Dict[str, List[int]] = {}

    # ========== COUNTERS ==========

    def incr(self, fish: str, circumstance: CatchCircumstance, delta: int = 1):
        """Add delta to (fish, circumstance), never dropping below zero"""
        circumstance = CatchCircumstance(circumstance)
        counts = self._records.get(fish)
        if counts is None:
            counts = [0] * SLOT_COUNT
            self._records[fish] = counts
        counts[circumstance] = max(0, counts[circumstance] + delta)

    def get(self, fish: str, circumstance: CatchCircumstance) -> int:
        counts = self._records.get(fish)
        if counts is None:
            return 0
        return counts[CatchCircumstance(circumstance)]

    def total(self, fish: str) -> int:
        """All successful catches of a fish kind (MISSED excluded)"""
        return sum(self.get(fish, c) for c in CatchCircumstance if c.is_catch)

    def perfect_total(self, fish: str) -> int:
        return sum(self.get(fish, c) for c in CatchCircumstance if c.is_perfect)

    def counts(self, fish: str) -> Dict[CatchCircumstance, int]:
        """Snapshot of every bucket for one fish kind"""
        return {c: self.get(fish, c) for c in CatchCircumstance}

    def records(self) -> List[Tuple[str, Dict[CatchCircumstance, int]]]:
        """Every non-empty record, ascending by fish kind"""
        return [
            (fish, self.counts(fish))
            for fish in sorted(self._records)
            if any(self._records[fish])
        ]

    def __len__(self):
        return len(self.records())

    # ========== PERSISTENCE ==========

    def load(self) -> int:
        """Replace in-memory records with the store's contents

        Returns:
            Number of non-empty records restored
        """
        if self._store is None:
            return 0
        restored = {}
        for key, raw in self._store.load_all().items():
            fish = fish_from_key(key)
            if fish is None:
                continue
            restored[fish] = normalize_counts(raw)
        self._records = restored
        loaded = len(self.records())
        logger.info(f"Catch statistics loaded: {loaded} fish")
        return loaded

    def save(self, fish: Optional[str] = None) -> bool:
        """Write one fish kind (or every record) through to the store

        Returns:
            True if every write succeeded (or there is no store)
        """
        if self._store is None:
            return True
        targets = [fish] if fish is not None else sorted(self._records)
        ok = True
        for name in targets:
            counts = self._records.get(name, [0] * SLOT_COUNT)
            if not self._store.save(store_key(name), list(counts)):
                logger.error(f"Could not persist catch statistics for {name}")
                ok = False
        return ok
