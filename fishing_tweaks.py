"""
Fishing Tweaks - Entry Point

Wires settings, statistics, the bite timer and the fishing cycle together for
a host integration. The host calls the returned app's event methods from its
own update tick / menu changed / button pressed callbacks.

Usage:
    app = FishingTweaks.create(host, settings_file, db_path)
    app.start_hotkeys()            # optional, global toggle key via pynput
    ...
    app.on_update_ticked()         # every host tick
    app.on_menu_changed(old, new)  # every menu change
"""

import logging
import random

from automation import FishingCycle
from config import SettingsManager
from core import BiteTimerCoordinator, CatchStatistics
from input import HotkeyListener
from services import LoggingService, StatsStore

logger = logging.getLogger("FishingTweaks")


class FishingTweaks:
    """Owns every component for one player session"""

    def __init__(self, settings_manager, stats_store, stats, cycle, logging_service=None):
        self.logging_service = logging_service
        self.settings_manager = settings_manager
        self.stats_store = stats_store
        self.stats = stats
        self.cycle = cycle
        self.hotkeys = None

    @classmethod
    def create(cls, host, settings_file, db_path, log_file=None, rng=None):
        """
        Build and load every component.

        Raises:
            ConfigError: If the settings file holds an unusable bite buffer or toggle key
            StatsStoreError: If the stats database cannot be opened
        """
        logging_service = LoggingService(log_file) if log_file is not None else None

        settings_manager = SettingsManager(settings_file)
        cycle_settings = settings_manager.load_cycle_settings()
        bite_timer = BiteTimerCoordinator(settings_manager.load_bite_buffer())

        stats_store = StatsStore(db_path)
        stats = CatchStatistics(stats_store)
        stats.load()

        cycle = FishingCycle(
            host,
            stats,
            cycle_settings,
            bite_timer=bite_timer,
            rng=rng or random.Random(),
            logger=logging_service.get_logger() if logging_service else logger,
        )
        logger.info("Fishing Tweaks ready")
        return cls(settings_manager, stats_store, stats, cycle, logging_service)

    # ========== HOST EVENTS ==========

    def on_update_ticked(self):
        self.cycle.on_update_ticked()

    def on_menu_changed(self, old_menu, new_menu):
        self.cycle.on_menu_changed(old_menu, new_menu)

    def on_button_pressed(self, key_name):
        return self.cycle.on_button_pressed(key_name)

    # ========== HOTKEYS ==========

    def start_hotkeys(self):
        """Listen for the toggle key globally instead of through host button events

        Presses are queued and applied on the next on_update_ticked().
        """
        if self.hotkeys is None:
            self.hotkeys = HotkeyListener(self.cycle.request_toggle)
            self.hotkeys.start()

    def stop_hotkeys(self):
        if self.hotkeys is not None:
            self.hotkeys.stop()
            self.hotkeys = None

    # ========== STATS ==========

    def export_stats_csv(self, filepath):
        return self.stats_store.export_csv(self.stats, filepath)

    def shutdown(self):
        """Stop the listener and flush every record"""
        self.stop_hotkeys()
        if not self.stats.save():
            logger.error("Some catch statistics could not be saved")
        if self.logging_service is not None:
            self.logging_service.close()
