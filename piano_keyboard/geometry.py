"""
Key rectangle assembly.

Walks a finished integer layout and emits one rectangle per key, white keys
first so that black keys end up on top when drawn in order. The wide lower
parts of the white keys are built separately; they lie below the black keys
and outside the side-by-side row of keys.
"""

from fractions import Fraction

from .models import KeyKind, KeyRectangle
from .quantize import PixelLayout, round_half_up
from .reference import REFERENCE_OCTAVE
from .scaler import ElementKind


def black_key_height(height_px: int) -> int:
    """Height of a black key on a keyboard ``height_px`` tall."""
    ratio = Fraction(REFERENCE_OCTAVE.black_key_length_um, REFERENCE_OCTAVE.white_key_length_um)
    return max(1, min(height_px, round_half_up(height_px * ratio)))


def assemble(layout: PixelLayout, height_px: int) -> tuple[KeyRectangle, ...]:
    """
    Build the key rectangles of an integer layout.

    Args:
        layout: Output of ``quantize``.
        height_px: Keyboard height; white keys take the full height.

    Returns:
        White key rectangles left to right, followed by black key rectangles
        left to right.
    """
    heights = {
        ElementKind.WHITE_KEY: height_px,
        ElementKind.BLACK_KEY: black_key_height(height_px),
    }
    kinds = {
        ElementKind.WHITE_KEY: KeyKind.WHITE,
        ElementKind.BLACK_KEY: KeyKind.BLACK,
    }

    white_keys = []
    black_keys = []
    for element in layout.keys():
        rect = KeyRectangle(
            x=element.x,
            y=0,
            width=element.width,
            height=heights[element.kind],
            kind=kinds[element.kind],
            octave_index=element.octave_index,
            note_index=element.note_index,
        )
        if rect.kind is KeyKind.WHITE:
            white_keys.append(rect)
        else:
            black_keys.append(rect)

    return tuple(white_keys + black_keys)


def white_key_fronts(layout: PixelLayout, height_px: int) -> tuple[KeyRectangle, ...]:
    """
    Build the wide lower part of every white key.

    Below the black keys neighbouring white keys widen until they meet. Two
    white keys with a black key between them are split by a gap as wide as
    the white/white gap, centred under the black key.

    Args:
        layout: Output of ``quantize``.
        height_px: Keyboard height.

    Returns:
        One rectangle per white key, left to right, spanning from the bottom
        of the black keys to the bottom of the keyboard. Empty if the black
        keys take the full height.
    """
    top = black_key_height(height_px)
    if top >= height_px:
        return ()

    gap_px = min(
        (e.width for e in layout.elements if e.kind is ElementKind.WHITE_WHITE_GAP),
        default=1,
    )
    whites = [e for e in layout.keys() if e.kind is ElementKind.WHITE_KEY]

    # (left, right) edge of the lower part of each white key
    edges = [[w.x, w.right] for w in whites]
    for i, (prev, cur) in enumerate(zip(whites, whites[1:])):
        between = cur.x - prev.right
        if cur.note_index == prev.note_index + 1 or cur.note_index < prev.note_index:
            continue  # E|F and B|C are already split by their own gap
        gap = min(gap_px, between)
        gap_start = prev.right + (between - gap) // 2
        edges[i][1] = gap_start
        edges[i + 1][0] = gap_start + gap

    return tuple(
        KeyRectangle(
            x=left,
            y=top,
            width=right - left,
            height=height_px - top,
            kind=KeyKind.WHITE,
            octave_index=white.octave_index,
            note_index=white.note_index,
        )
        for white, (left, right) in zip(whites, edges)
    )
