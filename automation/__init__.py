"""
Automation Module - Fishing Tweaks
==================================
Host-facing fishing automation.

The automation layer translates host events (update tick, menu change,
button press) into core decisions and writes the results back through an
injected host adapter. It never reads settings files or the stats database
directly; it receives a loaded CatchStatistics and a flat settings dict.

Modules:
    - fishing_cycle: Tick pipeline and menu handlers

Usage:
    from automation import FishingCycle

    cycle = FishingCycle(host, stats, settings_mgr.load_cycle_settings(), bite_timer)
    cycle.on_update_ticked()
"""

from .fishing_cycle import FishingCycle

__all__ = [
    'FishingCycle'
]
