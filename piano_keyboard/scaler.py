"""
Continuous layout of a keyboard.

Lays out margins, keys and gaps of the reference octave side by side and maps
them onto the requested pixel width with a single scale factor. Positions are
kept as exact fractions; rounding happens in ``quantize``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Iterator

from .errors import ConfigurationError
from .models import BuildConfig
from .reference import NOTES_PER_OCTAVE, ReferenceOctave, is_white, reference_for

logger = logging.getLogger(__name__)


class ElementKind(Enum):
    """Kinds of horizontal elements in a keyboard layout."""

    MARGIN = "margin"
    WHITE_KEY = "white_key"
    BLACK_KEY = "black_key"
    WHITE_WHITE_GAP = "white_white_gap"
    WHITE_BLACK_GAP = "white_black_gap"

    @property
    def is_key(self) -> bool:
        return self in (ElementKind.WHITE_KEY, ElementKind.BLACK_KEY)


@dataclass(frozen=True)
class ScaledElement:
    """
    One element with continuous pixel edges.

    Attributes:
        kind: What the element is.
        start: Left edge in pixels.
        end: Right edge in pixels.
        octave_index: Octave of a key, -1 for margins and gaps.
        note_index: Chromatic note of a key (C=0), -1 for margins and gaps.
    """

    kind: ElementKind
    start: Fraction
    end: Fraction
    octave_index: int = -1
    note_index: int = -1

    @property
    def width(self) -> Fraction:
        return self.end - self.start


@dataclass(frozen=True)
class ScaledLayout:
    """
    Continuous layout for the full octave range.

    Attributes:
        elements: Margins, keys and gaps ordered left to right.
        scale: Pixels per micrometre.
        width_px: Target width; equals the end of the last element.
        octave_count: Number of octaves laid out.
    """

    elements: tuple[ScaledElement, ...]
    scale: Fraction
    width_px: int
    octave_count: int


def _gap_kind(note_index: int) -> ElementKind:
    if is_white(note_index) and is_white(note_index + 1):
        return ElementKind.WHITE_WHITE_GAP
    return ElementKind.WHITE_BLACK_GAP


def _reference_elements(
    reference: ReferenceOctave, octave_count: int
) -> Iterator[tuple[ElementKind, int, int, int, int]]:
    """
    Yield (kind, start_um, end_um, octave_index, note_index) from left to right.

    Keys are placed at their octave offsets; whatever lies between the end of
    one key and the start of the next is a gap.
    """
    offsets = reference.key_offsets()
    yield ElementKind.MARGIN, 0, reference.margin_um, -1, -1

    previous_end = None
    previous_note = -1
    for octave in range(octave_count):
        octave_start = reference.margin_um + octave * reference.pitch_um
        for note in range(NOTES_PER_OCTAVE):
            start = octave_start + offsets[note]
            # removed white/black gaps leave the neighbours touching
            if previous_end is not None and start > previous_end:
                yield _gap_kind(previous_note), previous_end, start, -1, -1
            kind = ElementKind.WHITE_KEY if is_white(note) else ElementKind.BLACK_KEY
            end = start + reference.key_width(note)
            yield kind, start, end, octave, note
            previous_end, previous_note = end, note

    yield ElementKind.MARGIN, previous_end, previous_end + reference.margin_um, -1, -1


def check_config(config: BuildConfig) -> ReferenceOctave:
    """
    Reject configurations that cannot produce a valid layout.

    Args:
        config: Build options.

    Returns:
        The reference octave to scale.

    Raises:
        ConfigurationError: If a count or size is not positive, or the width
            is too small to give every element at least one pixel.
    """
    if config.octave_count < 1:
        raise ConfigurationError(f"octave_count must be at least 1, got {config.octave_count}")
    if config.width_px <= 0 or config.height_px <= 0:
        raise ConfigurationError(
            f"keyboard size must be positive, got {config.width_px}x{config.height_px}"
        )

    reference = reference_for(config.remove_black_white_gap)
    minimum = reference.minimum_width(config.octave_count)
    if config.width_px < minimum:
        raise ConfigurationError(
            f"width {config.width_px}px is too small for {config.octave_count} octave(s); "
            f"at least {minimum}px are needed"
        )
    return reference


def scale(config: BuildConfig) -> ScaledLayout:
    """
    Map the reference octave onto the requested width.

    Args:
        config: Build options.

    Returns:
        A continuous layout whose last edge is exactly ``config.width_px``.

    Raises:
        ConfigurationError: See ``check_config``.
    """
    reference = check_config(config)
    factor = Fraction(config.width_px, reference.total_width_um(config.octave_count))
    logger.debug(
        "Scaling %d octave(s) to %dpx: %s px/um",
        config.octave_count, config.width_px, factor,
    )

    elements = [
        ScaledElement(
            kind=kind,
            start=start_um * factor,
            end=end_um * factor,
            octave_index=octave,
            note_index=note,
        )
        for kind, start_um, end_um, octave, note in _reference_elements(reference, config.octave_count)
    ]

    return ScaledLayout(
        elements=tuple(elements),
        scale=factor,
        width_px=config.width_px,
        octave_count=config.octave_count,
    )
