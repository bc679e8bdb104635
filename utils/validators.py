# Copyright (C) 2026 BPS
# This file is part of Fishing Tweaks.
#
# Validation utilities for thresholds, timer buffer and hotkeys

import logging

logger = logging.getLogger('FishingTweaks')

# Named keys accepted besides single characters (pynput Key names)
SPECIAL_KEYS = {f"f{i}" for i in range(1, 13)} | {
    "space", "tab", "insert", "delete", "home", "end", "page_up", "page_down",
}


def validate_threshold(value, name="threshold"):
    """Threshold must be an int (negatives are clamped later, not rejected)"""
    if isinstance(value, bool):
        logger.warning(f"Invalid {name}: boolean")
        return False
    try:
        int(value)
        return True
    except (ValueError, TypeError, OverflowError):
        logger.warning(f"Invalid {name}: {value!r} not numeric")
        return False


def validate_bite_buffer(value):
    """Bite buffer must be a non-negative number of milliseconds"""
    if isinstance(value, bool):
        return False
    try:
        return float(value) >= 0
    except (ValueError, TypeError):
        return False


def validate_hotkey(key_name):
    """Hotkey is a single printable character or a known special key name"""
    if not key_name or not isinstance(key_name, str):
        return False
    key_name = key_name.lower()
    if len(key_name) == 1:
        return key_name.isprintable() and not key_name.isspace()
    return key_name in SPECIAL_KEYS
