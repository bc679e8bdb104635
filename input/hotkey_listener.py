"""
Hotkey Listener - Fishing Tweaks
================================
Global toggle hotkey using pynput.keyboard.Listener.

pynput is imported when the listener starts, so key handling can be used
(and tested) on machines without a keyboard backend.
"""

import logging

logger = logging.getLogger('FishingTweaks')


def key_to_name(key):
    """Normalize a pynput key (KeyCode or Key) to a lowercase name like 'v' or 'f4'"""
    try:
        char = key.char
    except AttributeError:
        char = None
    if char:
        return char.lower()
    return str(key).lower().replace("key.", "")


class HotkeyListener:
    """
    Calls on_key(key_name) whenever any key is pressed.

    Runs on pynput's listener thread, so the callback must not touch game
    state directly (FishingCycle.request_toggle only queues the toggle).
    """

    def __init__(self, on_key):
        self.on_key = on_key
        self.listener = None

    def on_press(self, key):
        """pynput on_press callback"""
        try:
            key_name = key_to_name(key)
            self.on_key(key_name)
        except Exception as e:
            # Exceptions would stop the pynput listener thread
            logger.error(f"Hotkey handler error: {e}", exc_info=True)

    def start(self):
        """Start the global listener thread"""
        from pynput.keyboard import Listener

        self.listener = Listener(on_press=self.on_press)
        self.listener.start()
        logger.info("Hotkey listener started")

    def stop(self):
        if self.listener is not None:
            self.listener.stop()
            self.listener = None
            logger.info("Hotkey listener stopped")
