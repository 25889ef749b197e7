"""Cursor, selection and keyboard handling for an editable text field."""

from __future__ import annotations

import enum
from typing import Protocol

from pixeldynasty.textedit.layout import NEWLINE, NEWLINE_WIDTH, TextRow
from pixeldynasty.textedit.navigation import (
    find_charpos,
    locate_coord,
    move_word_left,
    move_word_right,
)
from pixeldynasty.textedit.undo import UndoState

_CONTROL_BASE = 0x200000


class Key(enum.IntEnum):
    """Control keys; combine with ``SHIFT`` to extend the selection.

    Integer keys below ``_CONTROL_BASE`` are character codes and are typed.
    """

    LEFT = _CONTROL_BASE
    RIGHT = _CONTROL_BASE + 1
    UP = _CONTROL_BASE + 2
    DOWN = _CONTROL_BASE + 3
    PGUP = _CONTROL_BASE + 4
    PGDOWN = _CONTROL_BASE + 5
    LINESTART = _CONTROL_BASE + 6
    LINEEND = _CONTROL_BASE + 7
    TEXTSTART = _CONTROL_BASE + 8
    TEXTEND = _CONTROL_BASE + 9
    DELETE = _CONTROL_BASE + 10
    BACKSPACE = _CONTROL_BASE + 11
    UNDO = _CONTROL_BASE + 12
    REDO = _CONTROL_BASE + 13
    INSERT = _CONTROL_BASE + 14
    WORDLEFT = _CONTROL_BASE + 15
    WORDRIGHT = _CONTROL_BASE + 16
    SHIFT = 0x400000


class TextBuffer(Protocol):
    def __len__(self) -> int: ...

    def char_at(self, index: int) -> str: ...

    def layout_row(self, start: int) -> TextRow: ...

    def glyph_width(self, line_start: int, offset: int) -> float: ...

    def next_char_index(self, index: int) -> int: ...

    def prev_char_index(self, index: int) -> int: ...

    def is_space(self, char: str) -> bool: ...

    def delete(self, index: int, count: int) -> None: ...

    def insert(self, index: int, chars) -> bool: ...


class TextEditState:
    """Per-field editing state: cursor, selection, insert mode and history."""

    def __init__(self, single_line: bool = False) -> None:
        self.undostate = UndoState()
        self.reset(single_line)

    def reset(self, single_line: bool = False) -> None:
        """Return to a clean state with no selection and no history."""
        self.undostate.reset()
        self.cursor = 0
        self.select_start = 0
        self.select_end = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.single_line = bool(single_line)
        self.insert_mode = False
        self.row_count_per_page = 0

    # Selection helpers

    def has_selection(self) -> bool:
        return self.select_start != self.select_end

    def clamp(self, buffer: TextBuffer) -> None:
        """Keep cursor and selection inside the text after outside edits."""
        n = len(buffer)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        self.cursor = min(self.cursor, n)

    def sort_selection(self) -> None:
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def move_to_first(self) -> None:
        """Collapse the selection onto its first character."""
        if self.has_selection():
            self.sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def move_to_last(self, buffer: TextBuffer) -> None:
        """Collapse the selection onto its end."""
        if self.has_selection():
            self.sort_selection()
            self.clamp(buffer)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def _prep_selection_at_cursor(self) -> None:
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    def _delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        self.undostate.make_undo_delete(buffer, where, length)
        buffer.delete(where, length)
        self.has_preferred_x = False

    def delete_selection(self, buffer: TextBuffer) -> None:
        """Remove the selected text, leaving the cursor where it began."""
        self.clamp(buffer)
        if not self.has_selection():
            return
        if self.select_start < self.select_end:
            self._delete(buffer, self.select_start, self.select_end - self.select_start)
            self.select_end = self.cursor = self.select_start
        else:
            self._delete(buffer, self.select_end, self.select_start - self.select_end)
            self.select_start = self.cursor = self.select_end
        self.has_preferred_x = False

    # Mouse

    def click(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Place the cursor at the clicked point and clear the selection."""
        if self.single_line:
            y = buffer.layout_row(0).ymin
        self.cursor = locate_coord(buffer, x, y)
        self.select_start = self.cursor
        self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Extend the selection to the dragged-to point."""
        if self.single_line:
            y = buffer.layout_row(0).ymin
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        self.cursor = self.select_end = locate_coord(buffer, x, y)

    # Editing

    def cut(self, buffer: TextBuffer) -> bool:
        """Delete the selection; return whether there was one."""
        if self.has_selection():
            self.delete_selection(buffer)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, buffer: TextBuffer, text: str) -> bool:
        """Replace the selection with ``text``; return False if it did not fit."""
        self.clamp(buffer)
        self.delete_selection(buffer)
        if buffer.insert(self.cursor, text):
            self.undostate.make_undo_insert(self.cursor, len(text))
            self.cursor += len(text)
            self.has_preferred_x = False
            return True
        return False

    def type_text(self, buffer: TextBuffer, text: str) -> None:
        """Insert typed text, overwriting one character in insert mode."""
        if not text or (text[0] == NEWLINE and self.single_line):
            return
        if self.insert_mode and not self.has_selection() and self.cursor < len(buffer):
            self.undostate.make_undo_replace(buffer, self.cursor, 1, 1)
            buffer.delete(self.cursor, 1)
            if buffer.insert(self.cursor, text):
                self.cursor += len(text)
                self.has_preferred_x = False
        else:
            self.delete_selection(buffer)
            if buffer.insert(self.cursor, text):
                self.undostate.make_undo_insert(self.cursor, len(text))
                self.cursor += len(text)
                self.has_preferred_x = False

    def undo(self, buffer: TextBuffer) -> None:
        position = self.undostate.undo(buffer)
        if position is not None:
            self.cursor = position

    def redo(self, buffer: TextBuffer) -> None:
        position = self.undostate.redo(buffer)
        if position is not None:
            self.cursor = position

    # Keyboard

    def key(self, buffer: TextBuffer, key: int | str) -> None:
        """Apply one key press; strings and character codes are typed."""
        if isinstance(key, str):
            self.type_text(buffer, key)
            return

        shift = bool(key & Key.SHIFT)
        base = key & ~Key.SHIFT

        if key == Key.INSERT:
            self.insert_mode = not self.insert_mode
        elif key == Key.UNDO:
            self.undo(buffer)
            self.has_preferred_x = False
        elif key == Key.REDO:
            self.redo(buffer)
            self.has_preferred_x = False
        elif base == Key.LEFT:
            self._select_left(buffer) if shift else self._left()
        elif base == Key.RIGHT:
            self._select_right(buffer) if shift else self._right(buffer)
        elif base == Key.WORDLEFT:
            self._word_move(buffer, shift, move_word_left, first=True)
        elif base == Key.WORDRIGHT:
            self._word_move(buffer, shift, move_word_right, first=False)
        elif base in (Key.DOWN, Key.PGDOWN):
            self._move_down(buffer, key, shift, base == Key.PGDOWN)
        elif base in (Key.UP, Key.PGUP):
            self._move_up(buffer, key, shift, base == Key.PGUP)
        elif base == Key.DELETE:
            self._delete_forward(buffer)
        elif base == Key.BACKSPACE:
            self._backspace(buffer)
        elif base == Key.TEXTSTART:
            self._text_edge(buffer, shift, 0)
        elif base == Key.TEXTEND:
            self._text_edge(buffer, shift, len(buffer))
        elif base == Key.LINESTART:
            self._line_edge(buffer, shift, to_end=False)
        elif base == Key.LINEEND:
            self._line_edge(buffer, shift, to_end=True)
        elif 0 < key < _CONTROL_BASE:
            self.type_text(buffer, chr(key))

    def _left(self) -> None:
        if self.has_selection():
            self.move_to_first()
        elif self.cursor > 0:
            self.cursor -= 1
        self.has_preferred_x = False

    def _right(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self.move_to_last(buffer)
        else:
            self.cursor = buffer.next_char_index(self.cursor)
        self.clamp(buffer)
        self.has_preferred_x = False

    def _select_left(self, buffer: TextBuffer) -> None:
        self.clamp(buffer)
        self._prep_selection_at_cursor()
        if self.select_end > 0:
            self.select_end = buffer.prev_char_index(self.select_end)
        self.cursor = self.select_end
        self.has_preferred_x = False

    def _select_right(self, buffer: TextBuffer) -> None:
        self._prep_selection_at_cursor()
        self.select_end = buffer.next_char_index(self.select_end)
        self.clamp(buffer)
        self.cursor = self.select_end
        self.has_preferred_x = False

    def _word_move(self, buffer: TextBuffer, shift: bool, move, first: bool) -> None:
        if shift:
            if not self.has_selection():
                self._prep_selection_at_cursor()
            self.cursor = move(buffer, self.cursor)
            self.select_end = self.cursor
        elif self.has_selection():
            if first:
                self.move_to_first()
            else:
                self.move_to_last(buffer)
            return
        else:
            self.cursor = move(buffer, self.cursor)
        self.clamp(buffer)

    def _seek_column(self, buffer: TextBuffer, row_start: int, goal_x: float) -> TextRow:
        self.cursor = row_start
        row = buffer.layout_row(row_start)
        x = row.x0
        for offset in range(row.num_chars):
            dx = buffer.glyph_width(row_start, offset)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            self.cursor = buffer.next_char_index(self.cursor)
        self.clamp(buffer)
        self.has_preferred_x = True
        self.preferred_x = goal_x
        return row

    def _move_down(self, buffer: TextBuffer, key: int, shift: bool, is_page: bool) -> None:
        if not is_page and self.single_line:
            self.key(buffer, Key.RIGHT | (key & Key.SHIFT))
            return
        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self.move_to_last(buffer)

        self.clamp(buffer)
        find = find_charpos(buffer, self.cursor, self.single_line)
        row_count = self.row_count_per_page if is_page else 1

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            start = find.first_char + find.length
            if find.length == 0:
                break
            if buffer.char_at(start - 1) != NEWLINE:
                break
            row = self._seek_column(buffer, start, goal_x)
            if shift:
                self.select_end = self.cursor
            find.first_char = start
            find.length = row.num_chars

    def _move_up(self, buffer: TextBuffer, key: int, shift: bool, is_page: bool) -> None:
        if not is_page and self.single_line:
            self.key(buffer, Key.LEFT | (key & Key.SHIFT))
            return
        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self.move_to_first()

        self.clamp(buffer)
        find = find_charpos(buffer, self.cursor, self.single_line)
        row_count = self.row_count_per_page if is_page else 1

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if find.prev_first == find.first_char:
                break
            self._seek_column(buffer, find.prev_first, goal_x)
            if shift:
                self.select_end = self.cursor
            prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
            while prev_scan > 0 and buffer.char_at(prev_scan - 1) != NEWLINE:
                prev_scan -= 1
            find.first_char = find.prev_first
            find.prev_first = prev_scan

    def _delete_forward(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self.delete_selection(buffer)
        elif self.cursor < len(buffer):
            end = buffer.next_char_index(self.cursor)
            self._delete(buffer, self.cursor, end - self.cursor)
        self.has_preferred_x = False

    def _backspace(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self.delete_selection(buffer)
        else:
            self.clamp(buffer)
            if self.cursor > 0:
                prev = buffer.prev_char_index(self.cursor)
                self._delete(buffer, prev, self.cursor - prev)
                self.cursor = prev
        self.has_preferred_x = False

    def _text_edge(self, buffer: TextBuffer, shift: bool, position: int) -> None:
        if shift:
            self._prep_selection_at_cursor()
            self.cursor = self.select_end = position
        else:
            self.cursor = position
            self.select_start = self.select_end = 0
        self.has_preferred_x = False

    def _line_edge(self, buffer: TextBuffer, shift: bool, to_end: bool) -> None:
        n = len(buffer)
        self.clamp(buffer)
        if shift:
            self._prep_selection_at_cursor()
        else:
            self.move_to_first()
        if self.single_line:
            self.cursor = n if to_end else 0
        elif to_end:
            while self.cursor < n and buffer.char_at(self.cursor) != NEWLINE:
                self.cursor += 1
        else:
            while self.cursor > 0 and buffer.char_at(self.cursor - 1) != NEWLINE:
                self.cursor -= 1
        if shift:
            self.select_end = self.cursor
        self.has_preferred_x = False