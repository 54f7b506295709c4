"""
Keyboard build entry point.
"""

import logging
from typing import Protocol, Sequence, runtime_checkable

from .geometry import assemble, white_key_fronts
from .models import BuildConfig, Keyboard2D, KeyRectangle
from .quantize import quantize
from .scaler import scale

logger = logging.getLogger(__name__)


@runtime_checkable
class PlanarKeyboard(Protocol):
    """Anything that can be drawn as key rectangles on a plane."""

    def rectangles(self) -> Sequence[KeyRectangle]: ...

    def width(self) -> int: ...

    def height(self) -> int: ...

    def is_perfect(self) -> bool: ...


def build2d(config: BuildConfig) -> Keyboard2D:
    """
    Compute the pixel geometry of a flat keyboard.

    Args:
        config: Number of octaves, target size and gap option.

    Returns:
        The finished keyboard. Identical configs give identical keyboards.

    Raises:
        ConfigurationError: If the width is too small for the octave count.
        LayoutOverflowError: If rounding could not be reconciled with the width.
    """
    layout = quantize(scale(config))
    keyboard = Keyboard2D(
        rects=assemble(layout, config.height_px),
        total_width=config.width_px,
        total_height=config.height_px,
        perfect=layout.is_perfect,
        left_margin=layout.left_margin,
        right_margin=layout.right_margin,
        fronts=white_key_fronts(layout, config.height_px),
    )
    logger.debug(
        "Built %d-octave keyboard %dx%d (%s)",
        config.octave_count, config.width_px, config.height_px,
        "perfect" if keyboard.is_perfect() else "not perfect",
    )
    return keyboard
