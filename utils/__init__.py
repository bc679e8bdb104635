# Utils module for Fishing Tweaks

from .validators import (
    validate_threshold,
    validate_bite_buffer,
    validate_hotkey,
)

__all__ = [
    'validate_threshold',
    'validate_bite_buffer',
    'validate_hotkey',
]
