"""
Test suite for core/catch_stats.py
==================================
Tests for catch counters, totals, enumeration and store round trips.
"""

import os
import tempfile

import pytest

from core.catch_stats import CatchStatistics, fish_from_key, normalize_counts, store_key
from core.state import CatchCircumstance
from services.stats_manager import StatsStore


class DictStore:
    """In-memory store handle"""

    def __init__(self, data=None):
        self.data = dict(data or {})
        self.fail = False

    def load_all(self):
        return dict(self.data)

    def save(self, key, counts):
        if self.fail:
            return False
        self.data[key] = list(counts)
        return True


class TestCounters:
    """Tests for incr/get/total/perfect_total"""

    def test_unseen_fish_is_zero(self):
        stats = CatchStatistics()
        for circumstance in CatchCircumstance:
            assert stats.get("999", circumstance) == 0
        assert stats.total("999") == 0
        assert stats.perfect_total("999") == 0

    def test_end_to_end_counts(self):
        stats = CatchStatistics()
        for _ in range(3):
            stats.incr("150", CatchCircumstance.MANUAL_NORMAL)
        stats.incr("150", CatchCircumstance.MANUAL_PERFECT)

        assert stats.total("150") == 4
        assert stats.perfect_total("150") == 1

    def test_missed_excluded_from_total(self):
        stats = CatchStatistics()
        stats.incr("150", CatchCircumstance.MISSED, 5)
        stats.incr("150", CatchCircumstance.ASSISTED_NORMAL)

        assert stats.get("150", CatchCircumstance.MISSED) == 5
        assert stats.total("150") == 1

    def test_every_catch_bucket_counts_toward_total(self):
        stats = CatchStatistics()
        stats.incr("1", CatchCircumstance.MANUAL_NORMAL)
        stats.incr("1", CatchCircumstance.ASSISTED_NORMAL, 2)
        stats.incr("1", CatchCircumstance.MANUAL_PERFECT, 3)
        stats.incr("1", CatchCircumstance.ASSISTED_PERFECT, 4)

        assert stats.total("1") == 10
        assert stats.perfect_total("1") == 7

    def test_negative_delta_clamps_at_zero(self):
        stats = CatchStatistics()
        stats.incr("150", CatchCircumstance.MANUAL_NORMAL, 2)
        stats.incr("150", CatchCircumstance.MANUAL_NORMAL, -5)
        assert stats.get("150", CatchCircumstance.MANUAL_NORMAL) == 0

        stats.incr("151", CatchCircumstance.MANUAL_PERFECT, -1)
        assert stats.get("151", CatchCircumstance.MANUAL_PERFECT) == 0

    def test_negative_delta_undoes_catch(self):
        stats = CatchStatistics()
        stats.incr("150", CatchCircumstance.ASSISTED_PERFECT, 3)
        stats.incr("150", CatchCircumstance.ASSISTED_PERFECT, -1)
        assert stats.perfect_total("150") == 2

    def test_keys_are_exact(self):
        stats = CatchStatistics()
        stats.incr("Carp", CatchCircumstance.MANUAL_NORMAL)
        assert stats.total("carp") == 0
        assert stats.total(" Carp") == 0
        assert stats.total("Carp") == 1

    def test_queries_are_idempotent(self):
        stats = CatchStatistics()
        stats.incr("150", CatchCircumstance.MANUAL_PERFECT)
        assert stats.total("150") == stats.total("150")
        assert stats.perfect_total("150") == stats.perfect_total("150")
        assert stats.get("150", 2) == stats.get("150", 2) == 1

    def test_integer_circumstance_accepted(self):
        stats = CatchStatistics()
        stats.incr("150", 3)
        assert stats.get("150", CatchCircumstance.ASSISTED_PERFECT) == 1


class TestRecords:
    """Tests for deterministic enumeration"""

    def test_records_sorted_ascending(self):
        stats = CatchStatistics()
        for fish in ["702", "128", "150", "Z", "A"]:
            stats.incr(fish, CatchCircumstance.MANUAL_NORMAL)

        assert [fish for fish, _ in stats.records()] == ["128", "150", "702", "A", "Z"]

    def test_all_zero_record_is_absent(self):
        stats = CatchStatistics()
        stats.incr("150", CatchCircumstance.MANUAL_NORMAL)
        stats.incr("150", CatchCircumstance.MANUAL_NORMAL, -1)

        assert stats.records() == []
        assert len(stats) == 0

    def test_record_counts_snapshot(self):
        stats = CatchStatistics()
        stats.incr("150", CatchCircumstance.MISSED)
        fish, counts = stats.records()[0]

        assert fish == "150"
        assert counts[CatchCircumstance.MISSED] == 1
        assert counts[CatchCircumstance.MANUAL_NORMAL] == 0


class TestKeys:
    """Tests for store key namespacing"""

    def test_store_key_format(self):
        assert store_key("150") == "FT_150_FT"

    def test_fish_from_key(self):
        assert fish_from_key("FT_150_FT") == "150"
        assert fish_from_key("FT__FT") == ""
        assert fish_from_key("150") is None
        assert fish_from_key("CATCH_STATS_150_MOD") is None
        assert fish_from_key(None) is None

    def test_fish_containing_markers(self):
        assert fish_from_key(store_key("FT_x_FT")) == "FT_x_FT"


class TestNormalizeCounts:
    """Tests for restoring differently-shaped records"""

    def test_short_list_zero_filled(self):
        assert normalize_counts([1, 2, 3, 4]) == [1, 2, 3, 4, 0]

    def test_long_list_truncated(self):
        assert normalize_counts([1, 2, 3, 4, 5, 6, 7]) == [1, 2, 3, 4, 5]

    def test_bad_values_become_zero(self):
        assert normalize_counts([-3, "x", None, "2", 1.0]) == [0, 0, 0, 2, 1]

    def test_non_list(self):
        assert normalize_counts({"a": 1}) == [0, 0, 0, 0, 0]


class TestPersistence:
    """Tests for load/save through a store handle"""

    def test_save_and_load(self):
        store = DictStore()
        stats = CatchStatistics(store)
        stats.incr("150", CatchCircumstance.MANUAL_PERFECT, 2)
        assert stats.save() is True
        assert store.data == {"FT_150_FT": [0, 0, 2, 0, 0]}

        restored = CatchStatistics(store)
        assert restored.load() == 1
        assert restored.perfect_total("150") == 2

    def test_load_ignores_foreign_keys(self):
        store = DictStore({"FT_150_FT": [1, 0, 0, 0, 0], "128": [9, 9], "other": "x"})
        stats = CatchStatistics(store)
        stats.load()

        assert [fish for fish, _ in stats.records()] == ["150"]

    def test_load_legacy_four_slot_record(self):
        store = DictStore({"FT_150_FT": [1, 2, 3, 4]})
        stats = CatchStatistics(store)
        stats.load()

        assert stats.get("150", CatchCircumstance.MISSED) == 0
        assert stats.total("150") == 10

    def test_save_single_fish(self):
        store = DictStore()
        stats = CatchStatistics(store)
        stats.incr("150", CatchCircumstance.MANUAL_NORMAL)
        stats.incr("151", CatchCircumstance.MANUAL_NORMAL)
        stats.save("151")

        assert list(store.data) == ["FT_151_FT"]

    def test_save_failure_reported(self):
        store = DictStore()
        store.fail = True
        stats = CatchStatistics(store)
        stats.incr("150", CatchCircumstance.MANUAL_NORMAL)

        assert stats.save() is False

    def test_no_store(self):
        stats = CatchStatistics()
        assert stats.load() == 0
        assert stats.save() is True

    def test_sqlite_round_trip(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            db_path = os.path.join(temp_dir, "stats.db")

            stats = CatchStatistics(StatsStore(db_path))
            stats.incr("150", CatchCircumstance.ASSISTED_NORMAL, 3)
            stats.incr("150", CatchCircumstance.MISSED)
            assert stats.save() is True

            restored = CatchStatistics(StatsStore(db_path))
            restored.load()
            assert restored.counts("150") == stats.counts("150")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
