# Copyright (C) 2026 BPS
# This file is part of Fishing Tweaks.
#
# Centralized settings manager
# All load_*() and save_*() methods for the JSON settings file

import os
import json
import logging
import threading

from core.eligibility import EligibilityThresholds
from core.exceptions import ConfigError
from utils.validators import validate_bite_buffer, validate_hotkey, validate_threshold
from .defaults import (
    DEFAULT_BITE_BUFFER_MS,
    DEFAULT_FEATURE_STATES,
    DEFAULT_SKIP_SETTINGS,
    DEFAULT_THRESHOLDS,
    DEFAULT_TOGGLE_KEY,
    get_default_settings,
)

logger = logging.getLogger("FishingTweaks")


class SettingsManager:
    """Centralized settings management for Fishing Tweaks

    Keeps the whole JSON document cached in memory; every save rewrites the
    file. Access is locked because the hotkey listener thread reads settings.
    """

    def __init__(self, settings_file: str):
        """Initialize settings manager

        Args:
            settings_file: Absolute path to settings JSON file
        """
        self.settings_file = settings_file
        self._data = {}  # In-memory cache
        self._lock = threading.Lock()
        self._ensure_settings_file_exists()
        self._load_all()

    def _ensure_settings_file_exists(self):
        """Create default settings file if it doesn't exist"""
        if not os.path.exists(self.settings_file):
            logger.info("Creating default settings file...")
            try:
                with open(self.settings_file, "w", encoding="utf-8") as f:
                    json.dump(get_default_settings(), f, indent=4, ensure_ascii=False)
                logger.info(f"Default settings created at: {self.settings_file}")
            except OSError as e:
                logger.error(f"Failed to create default settings: {e}")

    def _load_all(self):
        """Load all settings from file (called at init, no lock needed)"""
        try:
            if os.path.exists(self.settings_file):
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    self._data = json.load(f)
            if not isinstance(self._data, dict):
                logger.error("Settings file is not a JSON object, using defaults")
                self._data = {}
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file: {e}")
            self._data = {}
        except OSError as e:
            logger.error(f"Error loading settings: {e}")
            self._data = {}

    def _save_all(self):
        """Save all settings to file (assumes caller holds lock)"""
        try:
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=4, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")

    # ========================================================================
    # LOADERS
    # ========================================================================

    def load_thresholds(self) -> EligibilityThresholds:
        """Load skip-minigame thresholds; unusable values fall back to defaults"""
        with self._lock:
            raw = dict(DEFAULT_THRESHOLDS)
            raw.update(self._data.get("thresholds") or {})
        for name in ("min_catch", "min_perfect"):
            if not validate_threshold(raw[name], name):
                raw[name] = DEFAULT_THRESHOLDS[name]
        return EligibilityThresholds.create(raw["min_catch"], raw["min_perfect"])

    def load_skip_settings(self):
        """Load force_perfect / skip_minigame_with_treasure"""
        with self._lock:
            settings = dict(DEFAULT_SKIP_SETTINGS)
            settings.update(self._data.get("skip_settings") or {})
            return settings

    def load_bite_buffer(self) -> float:
        """Load bite buffer in milliseconds

        Raises:
            ConfigError: If the stored value is negative or not a number
        """
        with self._lock:
            value = self._data.get("bite_buffer_ms", DEFAULT_BITE_BUFFER_MS)
        if not validate_bite_buffer(value):
            raise ConfigError(f"bite_buffer_ms must be a non-negative number, got {value!r}")
        return float(value)

    def load_toggle_key(self) -> str:
        """Load automation toggle key

        Raises:
            ConfigError: If the stored key is not a usable key name
        """
        with self._lock:
            key_name = self._data.get("toggle_key", DEFAULT_TOGGLE_KEY)
        if not validate_hotkey(key_name):
            raise ConfigError(f"toggle_key is not a valid key: {key_name!r}")
        return key_name.lower()

    def load_features(self):
        """Load feature flags, missing flags take their default"""
        with self._lock:
            features = dict(DEFAULT_FEATURE_STATES)
            features.update(self._data.get("features") or {})
            return {name: bool(value) for name, value in features.items()}

    def load_cycle_settings(self):
        """Flat settings dict consumed by FishingCycle"""
        settings = {
            "thresholds": self.load_thresholds(),
            "toggle_key": self.load_toggle_key(),
        }
        settings.update(self.load_skip_settings())
        settings.update(self.load_features())
        return settings

    # ========================================================================
    # SAVERS
    # ========================================================================

    def save_thresholds(self, min_catch, min_perfect):
        """Save skip-minigame thresholds"""
        with self._lock:
            self._data["thresholds"] = {
                "min_catch": int(min_catch),
                "min_perfect": int(min_perfect),
            }
            self._save_all()

    def save_skip_settings(self, skip_settings):
        with self._lock:
            self._data["skip_settings"] = skip_settings
            self._save_all()

    def save_bite_buffer(self, buffer_ms):
        """Save bite buffer in milliseconds

        Raises:
            ConfigError: If buffer_ms is negative or not a number
        """
        if not validate_bite_buffer(buffer_ms):
            raise ConfigError(f"bite_buffer_ms must be a non-negative number, got {buffer_ms!r}")
        with self._lock:
            self._data["bite_buffer_ms"] = buffer_ms
            self._save_all()

    def save_toggle_key(self, key_name):
        with self._lock:
            self._data["toggle_key"] = key_name
            self._save_all()

    def save_feature(self, name, enabled):
        """Save a single feature flag"""
        with self._lock:
            features = self._data.setdefault("features", {})
            features[name] = bool(enabled)
            self._save_all()
