# Copyright (C) 2026 BPS
# This file is part of Fishing Tweaks.
#
# Services Module - Stats Store
# Durable key-value store backing CatchStatistics

import csv
import json
import os
import sqlite3
import logging

from core.exceptions import StatsStoreError
from core.state import CatchCircumstance

logger = logging.getLogger("FishingTweaks")


class StatsStore:
    """
    Per-player catch statistics with SQLite persistence

    Each row maps an opaque key (see core.catch_stats.store_key) to a JSON
    list of counts. Values are stored as-is; shape tolerance is handled by
    CatchStatistics when it restores them.
    """

    def __init__(self, db_path: str = None):
        self.db_path = db_path or os.path.join(
            os.path.dirname(os.path.abspath(__file__)), "fishing_stats.db"
        )
        self._init_database()

    def _init_database(self):
        """Initialize SQLite database with tables"""
        try:
            with sqlite3.connect(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    CREATE TABLE IF NOT EXISTS fish_caught (
                        key TEXT PRIMARY KEY,
                        counts TEXT NOT NULL,
                        updated TEXT DEFAULT CURRENT_TIMESTAMP
                    )
                """
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Stats DB init error: {e}")
            raise StatsStoreError(f"Cannot open stats database {self.db_path}: {e}") from e

    def load_all(self) -> dict:
        """Load every stored row as {key: counts list}"""
        records = {}
        try:
            with sqlite3.connect(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT key, counts FROM fish_caught")
                rows = cursor.fetchall()
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Load stats error: {e}")
            return records

        for key, raw in rows:
            try:
                records[key] = json.loads(raw)
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping unreadable stats row {key}: {e}")
        return records

    def save(self, key: str, counts: list) -> bool:
        """Insert or replace one row"""
        try:
            with sqlite3.connect(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO fish_caught (key, counts, updated)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        counts = excluded.counts,
                        updated = excluded.updated
                """,
                    (key, json.dumps(list(counts))),
                )
                conn.commit()
            return True
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Save stats error for {key}: {e}")
            return False

    def export_csv(self, stats, filepath: str) -> bool:
        """Export every non-empty record of a CatchStatistics to CSV"""
        try:
            records = stats.records()
            with open(filepath, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                header = ["fish"] + [c.name.lower() for c in CatchCircumstance]
                writer.writerow(header + ["total", "perfect_total"])
                for fish, counts in records:
                    row = [fish] + [counts[c] for c in CatchCircumstance]
                    row += [stats.total(fish), stats.perfect_total(fish)]
                    writer.writerow(row)
            logger.info(f"Exported {len(records)} fish to {filepath}")
            return True
        except OSError as e:
            logger.error(f"Export CSV error: {e}")
            return False
