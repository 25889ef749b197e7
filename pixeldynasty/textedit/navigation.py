"""Mapping between screen coordinates and character positions, and word moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pixeldynasty.textedit.layout import NEWLINE, TextRow


class LaidOutText(Protocol):
    def __len__(self) -> int: ...

    def char_at(self, index: int) -> str: ...

    def layout_row(self, start: int) -> TextRow: ...

    def glyph_width(self, line_start: int, offset: int) -> float: ...

    def next_char_index(self, index: int) -> int: ...

    def is_space(self, char: str) -> bool: ...


@dataclass
class FindState:
    """Where a character sits: its x/y, its row and the row before it."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


def locate_coord(buffer: LaidOutText, x: float, y: float) -> int:
    """Return the character position nearest to the point (x, y)."""
    n = len(buffer)
    base_y = 0.0
    i = 0
    row = TextRow()

    while i < n:
        row = buffer.layout_row(i)
        if row.num_chars <= 0:
            return n
        if i == 0 and y < base_y + row.ymin:
            return 0
        if y < base_y + row.ymax:
            break
        i += row.num_chars
        base_y += row.baseline_y_delta

    if i >= n:
        return n

    if x < row.x0:
        return i

    if x < row.x1:
        prev_x = row.x0
        k = 0
        while k < row.num_chars:
            width = buffer.glyph_width(i, k)
            if x < prev_x + width:
                if x < prev_x + width / 2:
                    return k + i
                return buffer.next_char_index(i + k)
            prev_x += width
            k = buffer.next_char_index(i + k) - i

    last = i + row.num_chars - 1
    if buffer.char_at(last) == NEWLINE:
        return last
    return i + row.num_chars


def find_charpos(buffer: LaidOutText, n: int, single_line: bool) -> FindState:
    """Locate character ``n`` and remember the start of the row above it."""
    z = len(buffer)

    if n == z and single_line:
        row = buffer.layout_row(0)
        return FindState(
            x=row.x1,
            y=0.0,
            height=row.ymax - row.ymin,
            first_char=0,
            length=z,
        )

    find = FindState()
    prev_start = 0
    i = 0
    while True:
        row = buffer.layout_row(i)
        if n < i + row.num_chars:
            break
        if i + row.num_chars == z and z > 0 and buffer.char_at(z - 1) != NEWLINE:
            break
        prev_start = i
        i += row.num_chars
        find.y += row.baseline_y_delta
        if i == z:
            row.num_chars = 0
            break

    first = i
    find.first_char = first
    find.length = row.num_chars
    find.height = row.ymax - row.ymin
    find.prev_first = prev_start

    find.x = row.x0
    offset = 0
    while first + offset < n:
        find.x += buffer.glyph_width(first, offset)
        offset = buffer.next_char_index(first + offset) - first
    return find


def is_word_boundary(buffer: LaidOutText, index: int) -> bool:
    """True at the start of the text and where a word follows whitespace."""
    if index <= 0:
        return True
    return buffer.is_space(buffer.char_at(index - 1)) and not buffer.is_space(
        buffer.char_at(index)
    )


def move_word_left(buffer: LaidOutText, cursor: int) -> int:
    """Position of the start of the word before ``cursor``."""
    c = cursor - 1
    while c >= 0 and not is_word_boundary(buffer, c):
        c -= 1
    return max(c, 0)


def move_word_right(buffer: LaidOutText, cursor: int) -> int:
    """Position of the start of the word after ``cursor``, or the text end."""
    length = len(buffer)
    c = cursor + 1
    while c < length and not is_word_boundary(buffer, c):
        c += 1
    return min(c, length)