"""
piano_keyboard - pixel-exact piano keyboard geometry

Computes non-overlapping, integer-pixel rectangles for the white and black
keys of a piano keyboard of a given width and octave count, keeping the
proportions of a real keyboard as closely as whole pixels allow.

Usage:
    >>> from piano_keyboard import BuildConfig, build2d
    >>> keyboard = build2d(BuildConfig(octave_count=2, width_px=640, height_px=120))
    >>> len(keyboard.white_keys()), len(keyboard.black_keys())
    (14, 10)
"""

__version__ = "0.1.0"

from .errors import ConfigurationError, KeyboardLayoutError, LayoutOverflowError
from .keyboard import PlanarKeyboard, build2d
from .models import BuildConfig, Keyboard2D, KeyKind, KeyRectangle
from .reference import REFERENCE_OCTAVE, ReferenceOctave

__all__ = [
    "build2d",
    "BuildConfig",
    "Keyboard2D",
    "KeyKind",
    "KeyRectangle",
    "PlanarKeyboard",
    "ReferenceOctave",
    "REFERENCE_OCTAVE",
    "KeyboardLayoutError",
    "ConfigurationError",
    "LayoutOverflowError",
]
