"""
Rounding and distribution engine.

Turns a continuous layout into whole pixels. Every element width is rounded
half-up on its own, so elements with the same reference width end up equally
wide. Whatever the rounded widths miss the target by (the residue) is then
handed out tier by tier. A tier takes as much as it can before the next one
is touched; only the minimum width of one pixel stops it:

    white keys -> black keys -> gaps -> outer margins

Within a tier the affected elements are spread evenly over the keyboard.
"""

import logging
import math
from dataclasses import dataclass
from fractions import Fraction

from .errors import LayoutOverflowError
from .scaler import ElementKind, ScaledLayout

logger = logging.getLogger(__name__)

MIN_WIDTH_PX = 1

DISTRIBUTION_TIERS: tuple[tuple[ElementKind, ...], ...] = (
    (ElementKind.WHITE_KEY,),
    (ElementKind.BLACK_KEY,),
    (ElementKind.WHITE_WHITE_GAP, ElementKind.WHITE_BLACK_GAP),
)


def round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def spread(count: int, picks: int) -> list[int]:
    """
    Choose ``picks`` evenly spaced positions out of ``count``.

    Positions are centred, so a single pick lands in the middle.

    Args:
        count: Number of candidates.
        picks: How many to choose, at most ``count``.

    Returns:
        Sorted, distinct positions in ``range(count)``.
    """
    return [((2 * j + 1) * count) // (2 * picks) for j in range(picks)]


@dataclass
class PixelElement:
    """
    One element of the integer layout.

    Attributes:
        kind: What the element is.
        ideal: Continuous width before rounding.
        width: Final width in pixels.
        adjustment: Pixels added (or removed) by the distribution pass.
        x: Left edge in pixels.
        octave_index: Octave of a key, -1 otherwise.
        note_index: Chromatic note of a key, -1 otherwise.
    """

    kind: ElementKind
    ideal: Fraction
    width: int
    adjustment: int = 0
    x: int = 0
    octave_index: int = -1
    note_index: int = -1

    @property
    def right(self) -> int:
        return self.x + self.width


@dataclass(frozen=True)
class PixelLayout:
    """
    Integer layout with its perfection status.

    Attributes:
        elements: Margins, keys and gaps ordered left to right.
        width_px: Total width; the widths sum to exactly this.
        residue: Pixels the plainly rounded widths missed the target by.
        is_perfect: True when no distribution was needed.
    """

    elements: tuple[PixelElement, ...]
    width_px: int
    residue: int
    is_perfect: bool

    def keys(self) -> list[PixelElement]:
        return [e for e in self.elements if e.kind.is_key]

    @property
    def left_margin(self) -> int:
        return self.elements[0].width

    @property
    def right_margin(self) -> int:
        return self.elements[-1].width


def _distribute(elements: list[PixelElement], kinds: tuple[ElementKind, ...], remaining: int) -> int:
    """
    Hand ``remaining`` pixels to the elements of one tier.

    Every round gives each candidate one pixel; the last, partial round is
    spread evenly. Shrinking stops at ``MIN_WIDTH_PX``.

    Returns:
        The pixels this tier could not absorb.
    """
    step = 1 if remaining > 0 else -1
    absorbed = 0
    while remaining:
        candidates = [
            e for e in elements
            if e.kind in kinds and (step > 0 or e.width > MIN_WIDTH_PX)
        ]
        if not candidates:
            break
        picks = min(abs(remaining), len(candidates))
        for position in spread(len(candidates), picks):
            candidates[position].width += step
            candidates[position].adjustment += step
        remaining -= step * picks
        absorbed += step * picks
    if absorbed:
        logger.debug("%s absorbed %+d px", "/".join(k.value for k in kinds), absorbed)
    return remaining


def _distribute_to_margins(elements: list[PixelElement], remaining: int) -> None:
    step = 1 if remaining > 0 else -1
    left, right = elements[0], elements[-1]
    left_share = abs(remaining) // 2
    right_share = abs(remaining) - left_share
    for margin, share in ((left, left_share), (right, right_share)):
        margin.width += step * share
        margin.adjustment += step * share
    logger.debug("Margins absorbed %+d/%+d px", step * left_share, step * right_share)


def quantize(layout: ScaledLayout) -> PixelLayout:
    """
    Convert a continuous layout into whole pixels.

    Args:
        layout: Continuous layout from ``scale``.

    Returns:
        Integer layout whose widths add up to ``layout.width_px``.

    Raises:
        LayoutOverflowError: If the residue cannot be absorbed without an
            element dropping below one pixel.
    """
    elements = [
        PixelElement(
            kind=e.kind,
            ideal=e.width,
            width=round_half_up(e.width),
            octave_index=e.octave_index,
            note_index=e.note_index,
        )
        for e in layout.elements
    ]

    residue = layout.width_px - sum(e.width for e in elements)
    logger.debug("Naive rounding leaves a residue of %d px", residue)

    remaining = residue
    for kinds in DISTRIBUTION_TIERS:
        if remaining == 0:
            break
        remaining = _distribute(elements, kinds, remaining)
    if remaining:
        _distribute_to_margins(elements, remaining)

    narrow = [e for e in elements if e.width < MIN_WIDTH_PX]
    if narrow:
        raise LayoutOverflowError(
            f"cannot absorb a residue of {residue}px into a {layout.width_px}px layout: "
            f"{len(narrow)} element(s) would be narrower than {MIN_WIDTH_PX}px"
        )

    x = 0
    for element in elements:
        element.x = x
        x += element.width
    if x != layout.width_px:
        raise LayoutOverflowError(f"layout is {x}px wide instead of {layout.width_px}px")

    perfect = residue == 0
    logger.debug("Layout of %dpx is %s", layout.width_px, "perfect" if perfect else "not perfect")
    return PixelLayout(
        elements=tuple(elements),
        width_px=layout.width_px,
        residue=residue,
        is_perfect=perfect,
    )
