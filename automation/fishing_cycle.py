"""
Fishing Cycle Module
--------------------
Per-tick auto fishing pipeline and menu handlers.

Architecture:
- FishingCycle owns no game state; it reads and writes host objects through
  an injected host adapter (dependency injection)
- Decisions come from core (CatchStatistics, eligibility gate, outcome model,
  BiteTimerCoordinator)
- Entry points mirror the host's events:
  * on_button_pressed() - automation toggle
  * request_toggle() - automation toggle from another thread, applied on the
    next on_update_ticked()
  * on_update_ticked() - baiting, tackling, casting, auto hook, skip fish showing
  * on_menu_changed() - skip minigame, record catch, grab treasure

Tick order is fixed: later steps assume the earlier steps' side effects
(auto hook expects the rod to be cast).
"""

import logging
import random
import threading

from core.bite_timer import BiteTimerCoordinator
from core.eligibility import EligibilityThresholds, deficit, is_eligible
from core.outcome import draw_percent, is_perfect
from core.state import CatchCircumstance, MotionClass

# Progress value that makes the host resolve the minigame as caught (>= 1.0)
CATCH_PROGRESS = 2.0
# Below this progress a handled minigame counts as an escape
MISSED_PROGRESS = 0.5

MINIGAME_MENU = "minigame"
TREASURE_MENU = "treasure"


class FishingCycle:
    """
    Auto fishing orchestration.

    Host adapter interface used here:
        world_ready, player_can_move, active_menu (attributes)
        is_festival(), current_rod()
        find_attachment(rod, kind), attach(rod, item)
        cast(rod), pull(rod), bite_feedback(), done_holding_fish(rod)
        notify(message_key, **data)
        can_accept(item), take_treasure(menu, index), close_menu()
    """

    def __init__(self, host, stats, settings, bite_timer=None, rng=None, logger=None):
        """
        Initialize FishingCycle with all dependencies.

        Args:
            host: Host adapter (see class docstring)
            stats: CatchStatistics instance (already loaded)
            settings: Flat settings dict (SettingsManager.load_cycle_settings())
            bite_timer: BiteTimerCoordinator (default buffer if None)
            rng: random.Random used for perfect draws
            logger: Logger instance for logging
        """
        self.host = host
        self.stats = stats
        self.bite_timer = bite_timer or BiteTimerCoordinator()
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger("FishingTweaks")

        # Gate and minigame resolution
        self.thresholds = settings.get("thresholds", EligibilityThresholds())
        self.force_perfect = settings.get("force_perfect", False)
        self.skip_minigame_with_treasure = settings.get("skip_minigame_with_treasure", True)

        # Toggle key
        self.toggle_key = settings.get("toggle_key", "v")

        # Feature flags
        self.auto_baiting_enabled = settings.get("auto_baiting", True)
        self.auto_tackling_enabled = settings.get("auto_tackling", True)
        self.auto_hook_enabled = settings.get("auto_hook", True)
        self.skip_minigame_enabled = settings.get("skip_minigame", True)
        self.skip_fish_showing_enabled = settings.get("skip_fish_showing", True)
        self.grab_treasure_enabled = settings.get("grab_treasure", True)

        self.enabled = False
        # Set by the hotkey listener thread, consumed on the host tick
        self._toggle_requested = threading.Event()
        # Minigame menu resolved by automation, checked when it closes
        self._assisted_menu = None

    # ========== TOGGLE ==========

    def toggle(self) -> bool:
        """Flip automation on/off and return the new state"""
        self.enabled = not self.enabled
        if not self.enabled:
            self.bite_timer.reset()
        self.logger.info(f"Auto fishing {'enabled' if self.enabled else 'disabled'}")
        self.host.notify("fishing.start" if self.enabled else "fishing.stop")
        return self.enabled

    def on_button_pressed(self, key_name) -> bool:
        """Toggle automation when the configured key is pressed

        Returns:
            True if the key press toggled automation
        """
        if not self.host.world_ready:
            return False
        if not self._is_toggle_key(key_name):
            return False
        self.toggle()
        return True

    def request_toggle(self, key_name) -> bool:
        """Queue a toggle from a non-host thread (pynput listener)

        Only sets a flag; the bite timer and host are touched on the next
        on_update_ticked(), which runs on the host thread.

        Returns:
            True if a toggle was queued
        """
        if not self._is_toggle_key(key_name):
            return False
        self._toggle_requested.set()
        return True

    def _is_toggle_key(self, key_name) -> bool:
        return bool(key_name) and key_name.lower() == self.toggle_key

    def _apply_requested_toggle(self):
        if not self._toggle_requested.is_set():
            return
        self._toggle_requested.clear()
        if self.host.world_ready:
            self.toggle()

    # ========== UPDATE TICK ==========

    def on_update_ticked(self):
        """Run the tick pipeline in its fixed order"""
        self._apply_requested_toggle()
        if not self.enabled:
            return
        if not self.host.world_ready:
            return
        rod = self.host.current_rod()
        if rod is None:
            return

        self.auto_baiting(rod)
        self.auto_tackling(rod)
        self.auto_casting(rod)
        self.auto_hook(rod)
        self.skip_fish_showing(rod)

    def auto_baiting(self, rod):
        """Attach the first compatible bait when the rod has none"""
        if not self.auto_baiting_enabled:
            return
        if not rod.can_use_bait or rod.bait is not None:
            return

        bait = self.host.find_attachment(rod, "bait")
        if bait is None:
            return

        self.host.attach(rod, bait)
        self.logger.debug(f"Bait applied: {bait}")
        self.host.notify("baiting.applied", item=bait)

    def auto_tackling(self, rod):
        """Fill every empty tackle slot, stopping when none is left in inventory"""
        if not self.auto_tackling_enabled:
            return
        if not rod.can_use_tackle:
            return

        for slot in range(len(rod.tackle_slots)):
            if rod.tackle_slots[slot] is not None:
                continue

            tackle = self.host.find_attachment(rod, "tackle")
            if tackle is None:
                break

            self.host.attach(rod, tackle)
            self.logger.debug(f"Tackle applied: {tackle}")
            self.host.notify("tackling.applied", item=tackle)

    def auto_casting(self, rod):
        """Cast when the rod is idle and nothing blocks the player"""
        if rod.in_use:
            return
        if not self.host.player_can_move:
            return
        if self.host.active_menu is not None:
            return

        self.host.cast(rod)

    def auto_hook(self, rod):
        """Drive the bite timer and pull as soon as the original bite time passes"""
        if not self.auto_hook_enabled:
            return
        if not rod.is_fishing:
            return

        # Keep the fish nibbling until the hook is done
        if rod.is_nibbling:
            rod.nibble_accumulator = 0

        decision = self.bite_timer.tick(rod.time_until_bite, rod.bite_accumulator)
        rod.time_until_bite = decision.countdown
        if decision.reset_elapsed:
            rod.bite_accumulator = 0
        if decision.nibbling:
            rod.is_nibbling = True
        if decision.fire_hook:
            self.host.bite_feedback()
            self.host.pull(rod)

    def skip_fish_showing(self, rod):
        """Finish the holding-fish animation right away"""
        if not self.skip_fish_showing_enabled:
            return
        if not rod.fish_caught:
            return
        if self.host.player_can_move:
            return
        if self.host.is_festival():
            return

        self.host.done_holding_fish(rod)

    # ========== MENUS ==========

    def on_menu_changed(self, old_menu, new_menu):
        """Dispatch menu transitions; recording runs before handling the new menu"""
        if self._is_minigame(old_menu):
            self.record_catch(old_menu)
        if self._is_minigame(new_menu):
            # Only one minigame is open at a time
            self._assisted_menu = None
            self.skip_minigame(new_menu)
        elif new_menu is not None and getattr(new_menu, "kind", None) == TREASURE_MENU:
            self.grab_treasure(new_menu)

    def skip_minigame(self, menu) -> bool:
        """
        Resolve a freshly opened minigame when the fish is familiar enough.

        Returns:
            True if the minigame was resolved by automation
        """
        if not self.enabled or not self.skip_minigame_enabled:
            return False

        fish = menu.fish_id
        if not is_eligible(self.stats, fish, self.thresholds):
            catch_needed, perfect_needed = deficit(self.stats, fish, self.thresholds)
            self.host.notify(
                "bobber-bar.needed",
                fish=fish,
                catch_needed=catch_needed,
                perfect_needed=perfect_needed,
            )
            return False

        menu.distance_from_catching = CATCH_PROGRESS
        menu.treasure_caught = bool(menu.treasure and self.skip_minigame_with_treasure)
        menu.perfect = is_perfect(
            MotionClass.from_motion_type(menu.motion_type),
            bool(menu.boss_fish),
            menu.difficulty,
            self.force_perfect,
            draw_percent(self.rng),
        )
        self._assisted_menu = menu

        self.logger.info(f"Minigame skipped for {fish} (perfect={menu.perfect})")
        self.host.notify("bobber-bar.familiar", fish=fish)
        return True

    def record_catch(self, menu):
        """
        Count a closed minigame for its fish kind and persist the record.

        Returns:
            The CatchCircumstance recorded, or None if nothing was recorded
        """
        assisted = menu is self._assisted_menu
        if assisted:
            self._assisted_menu = None

        if not menu.handled_result:
            return None

        if menu.distance_from_catching < MISSED_PROGRESS:
            circumstance = CatchCircumstance.MISSED
        else:
            circumstance = CatchCircumstance.for_catch(bool(menu.perfect), assisted)

        self.stats.incr(menu.fish_id, circumstance)
        self.stats.save(menu.fish_id)
        self.logger.debug(f"Recorded {circumstance} for {menu.fish_id}")
        return circumstance

    def grab_treasure(self, menu):
        """Take every treasure item the inventory accepts, close when emptied"""
        if not self.enabled or not self.grab_treasure_enabled:
            return
        if not menu.from_fishing:
            return

        # Iterate over a snapshot; the host may remove taken items from menu.items
        for index, item in reversed(list(enumerate(menu.items))):
            if item is None or not self.host.can_accept(item):
                continue
            self.host.take_treasure(menu, index)

        if all(item is None for item in menu.items):
            self.host.close_menu()

    @staticmethod
    def _is_minigame(menu) -> bool:
        return menu is not None and getattr(menu, "kind", None) == MINIGAME_MENU
