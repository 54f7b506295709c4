"""
Exceptions raised while building a keyboard layout.
"""


class KeyboardLayoutError(Exception):
    """Base class for all layout failures."""


class ConfigurationError(KeyboardLayoutError, ValueError):
    """The requested width/octave combination cannot produce a valid layout."""


class LayoutOverflowError(KeyboardLayoutError, RuntimeError):
    """The rounding residue could not be absorbed by any distribution tier."""
