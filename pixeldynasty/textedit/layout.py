"""Plain monospace text storage and row layout used by the text editor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

NEWLINE = "\n"
# Width reported for a newline glyph; callers use it to stop horizontal scans.
NEWLINE_WIDTH = -1.0


@dataclass
class TextRow:
    """Result of laying out one displayed row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


class PlainTextBuffer:
    """Editable text with fixed-width glyphs, wrapped only at newlines."""

    def __init__(
        self,
        text: str = "",
        char_width: float = 1.0,
        line_height: float = 1.0,
        max_length: int | None = None,
    ) -> None:
        if char_width <= 0 or line_height <= 0:
            raise ValueError("char_width and line_height must be positive")
        if max_length is not None and len(text) > max_length:
            raise ValueError("initial text exceeds max_length")
        self._chars: list[str] = list(text)
        self.char_width = float(char_width)
        self.line_height = float(line_height)
        self.max_length = max_length

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.text

    def char_at(self, index: int) -> str:
        """Return the character at a 0-based position."""
        if not 0 <= index < len(self._chars):
            raise IndexError(f"character index {index} out of range")
        return self._chars[index]

    def layout_row(self, start: int) -> TextRow:
        """Lay out the row beginning at character ``start``."""
        length = len(self._chars)
        end = start
        while end < length and self._chars[end] != NEWLINE:
            end += 1
        visible = end - start
        if end < length:
            end += 1  # the newline belongs to its row
        return TextRow(
            x0=0.0,
            x1=visible * self.char_width,
            baseline_y_delta=self.line_height,
            ymin=0.0,
            ymax=self.line_height,
            num_chars=end - start,
        )

    def glyph_width(self, line_start: int, offset: int) -> float:
        """Width of the character ``offset`` places into the row at ``line_start``."""
        if self.char_at(line_start + offset) == NEWLINE:
            return NEWLINE_WIDTH
        return self.char_width

    def next_char_index(self, index: int) -> int:
        return index + 1

    def prev_char_index(self, index: int) -> int:
        return index - 1

    def is_space(self, char: str) -> bool:
        return char.isspace()

    def delete(self, index: int, count: int) -> None:
        """Remove ``count`` characters starting at ``index``."""
        if index < 0 or count < 0 or index + count > len(self._chars):
            raise IndexError("deletion range out of bounds")
        del self._chars[index:index + count]

    def insert(self, index: int, chars: Iterable[str]) -> bool:
        """Insert characters at ``index``; return False if they do not fit."""
        new = list(chars)
        if not 0 <= index <= len(self._chars):
            raise IndexError(f"insert position {index} out of range")
        if self.max_length is not None and len(self._chars) + len(new) > self.max_length:
            return False
        self._chars[index:index] = new
        return True