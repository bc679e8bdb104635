"""
Input Module - Fishing Tweaks
=============================
Keyboard input for toggling automation.

The only input handled is the global toggle key; pynput stays isolated in
this package.

Modules:
    - hotkey_listener: Global key listener feeding FishingCycle.request_toggle

Usage:
    from input import HotkeyListener

    hotkeys = HotkeyListener(cycle.request_toggle)
    hotkeys.start()
"""

from .hotkey_listener import HotkeyListener, key_to_name

__all__ = [
    'HotkeyListener',
    'key_to_name',
]
