# Copyright (C) 2026 BPS
# This file is part of Fishing Tweaks.
#
# Services Module - Public Interface

from .stats_manager import StatsStore
from .logging_service import LoggingService

__all__ = [
    "StatsStore",
    "LoggingService",
]
