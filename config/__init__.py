# Config module for Fishing Tweaks

from .settings_manager import SettingsManager
from .defaults import get_default_settings, DEFAULT_BITE_BUFFER_MS

__all__ = ['SettingsManager', 'get_default_settings', 'DEFAULT_BITE_BUFFER_MS']
