from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

NOTE_NAMES = ('C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B')


class KeyKind(Enum):
    """Colour class of a piano key."""

    WHITE = "white"
    BLACK = "black"


class BuildConfig(BaseModel):
    """Options for a single keyboard build."""

    model_config = ConfigDict(frozen=True)

    octave_count: int = Field(ge=1)
    width_px: int = Field(gt=0)
    height_px: int = Field(gt=0)
    remove_black_white_gap: bool = False


class KeyRectangle(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0)
    y: int = Field(ge=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    kind: KeyKind
    octave_index: int = Field(ge=0)
    note_index: int = Field(ge=0, le=11)

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def note_name(self) -> str:
        return NOTE_NAMES[self.note_index]

    def overlaps(self, other: "KeyRectangle") -> bool:
        """True when the two rectangles share a non-empty area."""
        return (
            self.x < other.right and other.x < self.right
            and self.y < other.bottom and other.y < self.bottom
        )


class Keyboard2D(BaseModel):
    """
    A finished two-dimensional keyboard.

    White keys come first in ``rects`` so that a renderer drawing them in
    order paints black keys on top.

    Attributes:
        rects: Key rectangles, white keys left to right, then black keys.
        total_width: Keyboard width in pixels, margins included.
        total_height: Keyboard height in pixels.
        perfect: False when the rounding residue had to be distributed.
        left_margin: Free pixels left of the first key.
        right_margin: Free pixels right of the last key.
        fronts: Wide lower part of every white key, below the black keys,
            left to right. Empty when the black keys are full height.
    """

    model_config = ConfigDict(frozen=True)

    rects: Tuple[KeyRectangle, ...]
    total_width: int = Field(gt=0)
    total_height: int = Field(gt=0)
    perfect: bool
    left_margin: int = Field(ge=0)
    right_margin: int = Field(ge=0)
    fronts: Tuple[KeyRectangle, ...] = ()

    def rectangles(self) -> Tuple[KeyRectangle, ...]:
        return self.rects

    def width(self) -> int:
        return self.total_width

    def height(self) -> int:
        return self.total_height

    def is_perfect(self) -> bool:
        return self.perfect

    def white_keys(self, with_fronts: bool = False) -> Tuple[KeyRectangle, ...]:
        """
        White key rectangles.

        Args:
            with_fronts: Also return the wide lower parts. Each white key is
                then the union of its full-height rectangle and its front.
        """
        keys = tuple(r for r in self.rects if r.kind is KeyKind.WHITE)
        if with_fronts:
            return keys + self.fronts
        return keys

    def black_keys(self) -> Tuple[KeyRectangle, ...]:
        return tuple(r for r in self.rects if r.kind is KeyKind.BLACK)
