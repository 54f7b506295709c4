"""Unit tests for the rounding and distribution engine.

Layouts are built by hand so that the residue and the tier absorbing it are
known in advance.
"""

from fractions import Fraction

import pytest

from piano_keyboard import BuildConfig, LayoutOverflowError
from piano_keyboard.quantize import quantize, round_half_up, spread
from piano_keyboard.scaler import ElementKind, ScaledElement, ScaledLayout, scale

M = ElementKind.MARGIN
W = ElementKind.WHITE_KEY
B = ElementKind.BLACK_KEY
WB = ElementKind.WHITE_BLACK_GAP
WW = ElementKind.WHITE_WHITE_GAP


def _layout(*parts: tuple[ElementKind, str]) -> ScaledLayout:
    elements = []
    x = Fraction(0)
    for kind, width in parts:
        w = Fraction(width)
        elements.append(ScaledElement(kind=kind, start=x, end=x + w))
        x += w
    assert x.denominator == 1
    return ScaledLayout(elements=tuple(elements), scale=Fraction(1), width_px=int(x), octave_count=1)


def _widths(layout) -> list[int]:
    return [e.width for e in layout.elements]


def test_round_half_up() -> None:
    assert round_half_up(Fraction(5, 2)) == 3
    assert round_half_up(Fraction(7, 2)) == 4
    assert round_half_up(Fraction("10.49")) == 10
    assert round_half_up(Fraction(1, 2)) == 1


def test_spread_is_centred_and_even() -> None:
    assert spread(7, 0) == []
    assert spread(7, 1) == [3]
    assert spread(7, 2) == [1, 5]
    assert spread(10, 3) == [1, 5, 8]
    assert spread(7, 7) == list(range(7))


def test_exact_layout_is_perfect() -> None:
    result = quantize(_layout((M, "2"), (W, "10"), (WB, "2"), (B, "6"), (WB, "2"), (W, "10"), (M, "2")))

    assert result.is_perfect
    assert result.residue == 0
    assert all(e.adjustment == 0 for e in result.elements)
    assert [e.x for e in result.elements] == [0, 2, 12, 14, 20, 22, 32]


def test_single_pixel_goes_to_middle_white_key() -> None:
    parts = [(M, "2.1")] + [(W, "10.1")] * 7 + [(M, "2.2")]
    result = quantize(_layout(*parts))

    assert result.residue == 1
    assert not result.is_perfect
    adjusted = [i for i, e in enumerate(result.elements) if e.adjustment]
    assert adjusted == [4]  # fourth of seven white keys
    assert sum(_widths(result)) == 75


def test_white_keys_share_residue_evenly() -> None:
    parts = [(M, "2.3")] + [(W, "10.2")] * 7 + [(M, "2.3")]
    result = quantize(_layout(*parts))

    assert result.residue == 2
    assert _widths(result) == [2, 10, 11, 10, 10, 10, 11, 10, 2]


def test_white_keys_take_the_whole_positive_residue() -> None:
    result = quantize(_layout(
        (M, "2.4"), (W, "10.4"), (WB, "2.4"), (B, "5.4"), (WB, "2.4"), (W, "10.4"),
        (WW, "2"), (W, "10.4"), (WB, "2.4"), (B, "5.4"), (M, "2.4"),
    ))

    assert result.residue == 4
    # every white key gets one pixel, the middle one a second
    assert _widths(result) == [2, 11, 2, 5, 2, 12, 2, 11, 2, 5, 2]
    assert [e.x for e in result.elements] == [0, 2, 13, 15, 20, 22, 34, 36, 47, 49, 54]
    assert all(e.adjustment == 0 for e in result.elements if e.kind is not W)


def test_white_keys_shrink_more_than_once() -> None:
    result = quantize(_layout(
        (M, "2.6"), (W, "10.6"), (WB, "2.6"), (B, "5.6"), (WB, "2.6"), (W, "10.6"),
        (WW, "2"), (W, "10.6"), (WB, "2.6"), (B, "5.6"), (M, "2.6"),
    ))

    assert result.residue == -4
    assert _widths(result) == [3, 10, 3, 6, 3, 9, 2, 10, 3, 6, 3]
    assert [e.adjustment for e in result.elements if e.kind is W] == [-1, -2, -1]
    assert sum(_widths(result)) == result.width_px == 58


def test_black_keys_shrink_once_white_keys_hit_the_floor() -> None:
    result = quantize(_layout(
        (M, "2.5"), (W, "1.5"), (WB, "2.5"), (B, "5.5"), (WB, "2"), (W, "1.5"),
        (WB, "2"), (B, "5.5"), (WB, "2"), (W, "1.5"), (M, "2.5"),
    ))

    assert result.residue == -4
    assert _widths(result) == [3, 1, 3, 6, 2, 1, 2, 5, 2, 1, 3]
    assert all(e.adjustment == 0 for e in result.elements if e.kind in (WB, WW, M))


def test_large_residue_on_a_real_octave_stays_on_white_keys() -> None:
    # 170px for one octave rounds to 162px: eight pixels short
    result = quantize(scale(BuildConfig(octave_count=1, width_px=170, height_px=100)))

    assert result.residue == 8
    whites = [e for e in result.elements if e.kind is W]
    assert [e.adjustment for e in whites] == [1, 1, 1, 2, 1, 1, 1]
    assert [e.width for e in whites] == [15, 15, 15, 15, 14, 14, 14]
    assert all(e.adjustment == 0 for e in result.elements if e.kind is not W)
    assert all(e.width == 11 for e in result.elements if e.kind is B)


def test_margins_are_the_last_resort() -> None:
    result = quantize(_layout(
        (M, "3"), (W, "0.6"), (WB, "0.6"), (B, "0.6"), (WB, "0.6"), (W, "0.6"), (M, "3"),
    ))

    assert result.residue == -2
    assert _widths(result) == [2, 1, 1, 1, 1, 1, 2]
    assert (result.left_margin, result.right_margin) == (2, 2)
    assert not result.is_perfect


def test_odd_margin_pixel_goes_right() -> None:
    result = quantize(_layout(
        (M, "4"), (W, "0.5"), (WB, "0.5"), (B, "0.5"), (WB, "0.5"), (W, "0.5"), (WW, "0.5"), (M, "4"),
    ))

    assert result.residue == -3
    assert result.left_margin == 3
    assert result.right_margin == 2
    assert sum(_widths(result)) == 11


def test_unabsorbable_residue_overflows() -> None:
    layout = _layout((M, "1"), (W, "0.5"), (WB, "0.5"), (W, "0.5"), (WB, "0.5"), (M, "1"))

    with pytest.raises(LayoutOverflowError):
        quantize(layout)
