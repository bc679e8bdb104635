# Copyright (C) 2026 BPS
# This file is part of Fishing Tweaks.
#
# Default configuration values

import copy

# Skip-minigame gate (catch history required per fish kind)
DEFAULT_THRESHOLDS = {
    "min_catch": 3,
    "min_perfect": 0,
}

# Minigame resolution when the gate allows a skip
DEFAULT_SKIP_SETTINGS = {
    "force_perfect": False,
    "skip_minigame_with_treasure": True,
}

# Extra time pushed onto the host bite countdown (milliseconds)
DEFAULT_BITE_BUFFER_MS = 5000

# Global toggle key for automation
DEFAULT_TOGGLE_KEY = "v"

# Default feature states (applied on first run)
DEFAULT_FEATURE_STATES = {
    "auto_baiting": True,
    "auto_tackling": True,
    "auto_hook": True,
    "skip_minigame": True,
    "skip_fish_showing": True,
    "grab_treasure": True,
}


def get_default_settings():
    """Full settings document written on first run"""
    return {
        "toggle_key": DEFAULT_TOGGLE_KEY,
        "thresholds": copy.deepcopy(DEFAULT_THRESHOLDS),
        "skip_settings": copy.deepcopy(DEFAULT_SKIP_SETTINGS),
        "bite_buffer_ms": DEFAULT_BITE_BUFFER_MS,
        "features": copy.deepcopy(DEFAULT_FEATURE_STATES),
    }
