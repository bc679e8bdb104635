"""
Test suite for services/stats_manager.py
=========================================
Tests for the SQLite stats store and CSV export.
"""

import csv
import os
import sqlite3
import tempfile

import pytest

from core.catch_stats import CatchStatistics
from core.exceptions import StatsStoreError
from core.state import CatchCircumstance
from services.stats_manager import StatsStore


class TestStatsStore:
    """Tests for StatsStore rows"""

    def test_creates_database(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            db_path = os.path.join(temp_dir, "stats.db")

            StatsStore(db_path)

            assert os.path.exists(db_path)

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            store = StatsStore(os.path.join(temp_dir, "stats.db"))

            assert store.save("FT_150_FT", [1, 2, 3, 4, 5]) == True
            assert store.load_all() == {"FT_150_FT": [1, 2, 3, 4, 5]}

    def test_save_overwrites(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            store = StatsStore(os.path.join(temp_dir, "stats.db"))

            store.save("FT_150_FT", [1, 0, 0, 0, 0])
            store.save("FT_150_FT", [2, 0, 0, 0, 0])

            assert store.load_all() == {"FT_150_FT": [2, 0, 0, 0, 0]}

    def test_unreadable_row_skipped(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            db_path = os.path.join(temp_dir, "stats.db")
            store = StatsStore(db_path)
            store.save("FT_150_FT", [1, 0, 0, 0, 0])

            with sqlite3.connect(db_path) as conn:
                conn.execute(
                    "INSERT INTO fish_caught (key, counts) VALUES (?, ?)",
                    ("FT_151_FT", "{broken"),
                )
                conn.commit()

            assert store.load_all() == {"FT_150_FT": [1, 0, 0, 0, 0]}

    def test_unopenable_database_raises(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            # A directory cannot be opened as a database file
            with pytest.raises(StatsStoreError):
                StatsStore(temp_dir)


class TestExportCSV:
    """Tests for CSV export"""

    def test_export_rows_sorted(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            store = StatsStore(os.path.join(temp_dir, "stats.db"))
            stats = CatchStatistics(store)
            stats.incr("702", CatchCircumstance.MANUAL_NORMAL)
            stats.incr("150", CatchCircumstance.ASSISTED_PERFECT, 2)
            stats.incr("150", CatchCircumstance.MISSED)

            csv_path = os.path.join(temp_dir, "stats.csv")
            assert store.export_csv(stats, csv_path) == True

            with open(csv_path, encoding="utf-8") as f:
                lines = f.read().splitlines()

            assert lines[0] == (
                "fish,manual_normal,assisted_normal,manual_perfect,"
                "assisted_perfect,missed,total,perfect_total"
            )
            assert lines[1] == "150,0,0,0,2,1,2,2"
            assert lines[2] == "702,1,0,0,0,0,1,0"

    def test_export_quotes_fish_with_separators(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            store = StatsStore(os.path.join(temp_dir, "stats.db"))
            stats = CatchStatistics(store)
            stats.incr("Fish, Large", CatchCircumstance.MANUAL_NORMAL)
            stats.incr('Eel "Big"\nOne', CatchCircumstance.MANUAL_PERFECT)

            csv_path = os.path.join(temp_dir, "stats.csv")
            assert store.export_csv(stats, csv_path) == True

            with open(csv_path, encoding="utf-8", newline="") as f:
                rows = list(csv.reader(f))

            assert len(rows) == 3
            assert all(len(row) == len(rows[0]) for row in rows)
            assert rows[1] == ['Eel "Big"\nOne', "0", "0", "1", "0", "0", "1", "1"]
            assert rows[2] == ["Fish, Large", "1", "0", "0", "0", "0", "1", "0"]

    def test_export_bad_path(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            store = StatsStore(os.path.join(temp_dir, "stats.db"))
            bad_path = os.path.join(temp_dir, "missing", "stats.csv")

            assert store.export_csv(CatchStatistics(), bad_path) == False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
