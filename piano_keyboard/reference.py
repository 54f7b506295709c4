"""
Reference octave dimensions.

Real-world measurements of one octave of a manual keyboard, taken from
http://www.rwgiangiulio.com/construction/manual/layout.jpg. Widths are the
upper ("small") widths at the height of the black keys, where all twelve keys
sit side by side. All lengths are integer micrometres so that scaling stays
exact.
"""

from dataclasses import dataclass, replace

# Chromatic positions within an octave
WHITE_NOTES = frozenset({0, 2, 4, 5, 7, 9, 11})  # C, D, E, F, G, A, B
NOTES_PER_OCTAVE = 12


def is_white(note_index: int) -> bool:
    """Return True if the chromatic note index is a white key."""
    return note_index % NOTES_PER_OCTAVE in WHITE_NOTES


@dataclass(frozen=True)
class ReferenceOctave:
    """
    Continuous dimensions of one octave.

    Attributes:
        key_widths_um: Width of each of the twelve keys, indexed C=0 .. B=11.
        white_white_gap_um: Gap between two adjacent white keys (E|F, B|C).
        white_black_gap_um: Gap between a white key and a black key.
        margin_um: Space left of the first key and right of the last key.
        white_key_length_um: Full length of a white key.
        black_key_length_um: Length of a black key.
    """

    key_widths_um: tuple[int, ...]
    white_white_gap_um: int
    white_black_gap_um: int
    margin_um: int
    white_key_length_um: int
    black_key_length_um: int

    def key_width(self, note_index: int) -> int:
        return self.key_widths_um[note_index % NOTES_PER_OCTAVE]

    def gap_after(self, note_index: int) -> int:
        """
        Width of the gap between a key and its right-hand neighbour.

        Args:
            note_index: Chromatic index of the left key. B (11) wraps to the
                C of the next octave.

        Returns:
            Gap width in micrometres.
        """
        if is_white(note_index) and is_white(note_index + 1):
            return self.white_white_gap_um
        return self.white_black_gap_um

    @property
    def pitch_um(self) -> int:
        """Distance from one C to the next, trailing B|C gap included."""
        return sum(self.key_widths_um) + sum(self.gap_after(n) for n in range(NOTES_PER_OCTAVE))

    def key_offsets(self) -> tuple[int, ...]:
        """Left edge of every key relative to the left edge of C."""
        offsets = []
        x = 0
        for note in range(NOTES_PER_OCTAVE):
            offsets.append(x)
            x += self.key_width(note) + self.gap_after(note)
        return tuple(offsets)

    def total_width_um(self, octave_count: int) -> int:
        """Width of a keyboard of ``octave_count`` octaves, both margins included."""
        # the last B is followed by the right margin instead of a B|C gap
        return 2 * self.margin_um + octave_count * self.pitch_um - self.gap_after(11)

    def smallest_element_um(self) -> int:
        widths = list(self.key_widths_um) + [self.white_white_gap_um, self.margin_um]
        if self.white_black_gap_um > 0:
            widths.append(self.white_black_gap_um)
        return min(widths)

    def minimum_width(self, octave_count: int) -> int:
        """
        Smallest pixel width at which every element is at least one pixel wide.
        """
        total = self.total_width_um(octave_count)
        smallest = self.smallest_element_um()
        return -(-total // smallest)

    def without_white_black_gap(self) -> "ReferenceOctave":
        return replace(self, white_black_gap_um=0)


REFERENCE_OCTAVE = ReferenceOctave(
    key_widths_um=(
        13_970,  # C
        11_000,  # C#
        13_970,  # D
        11_000,  # D#
        13_970,  # E
        12_830,  # F
        11_000,  # F#
        13_080,  # G
        11_000,  # G#
        13_080,  # A
        11_000,  # A#
        12_830,  # B
    ),
    white_white_gap_um=1_270,
    white_black_gap_um=1_270,
    margin_um=1_270,
    white_key_length_um=126_270,
    black_key_length_um=80_000,
)


GAPLESS_REFERENCE_OCTAVE = REFERENCE_OCTAVE.without_white_black_gap()


def reference_for(remove_black_white_gap: bool) -> ReferenceOctave:
    return GAPLESS_REFERENCE_OCTAVE if remove_black_white_gap else REFERENCE_OCTAVE
