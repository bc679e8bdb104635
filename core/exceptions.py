"""
Core Exceptions

Custom exceptions for configuration and persistence failures.
"""


class FishingTweaksException(Exception):
    """Base exception for Fishing Tweaks errors"""
    pass


class ConfigError(FishingTweaksException):
    """
    Raised when a configuration value cannot be used.

    Only raised while loading configuration, never from a per-tick call.
    """
    pass


class StatsStoreError(FishingTweaksException):
    """Raised when the statistics store cannot be opened"""
    pass
