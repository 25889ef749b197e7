"""Bounded undo/redo history for the text editor.

Undo records grow from the front of a fixed-size record table and redo
records from the back; the characters they need are kept in a shared
character pool, undo characters at the start and redo characters at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

DEFAULT_STATE_COUNT = 99
DEFAULT_CHAR_COUNT = 999


class EditableText(Protocol):
    def char_at(self, index: int) -> str: ...

    def delete(self, index: int, count: int) -> None: ...

    def insert(self, index: int, chars: list[str]) -> bool: ...


@dataclass
class UndoRecord:
    """One reversible edit: ``delete_length`` chars at ``where`` are replaced
    by the ``insert_length`` chars kept at ``char_storage`` (-1 if none)."""

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    char_storage: int = -1


def _read(buffer: EditableText, where: int, length: int) -> list[str]:
    return [buffer.char_at(index) for index in range(where, where + length)]


class UndoState:
    """Undo and redo stacks sharing one record table and one character pool."""

    def __init__(
        self,
        state_count: int = DEFAULT_STATE_COUNT,
        char_count: int = DEFAULT_CHAR_COUNT,
    ) -> None:
        if state_count < 1 or char_count < 1:
            raise ValueError("state_count and char_count must be positive")
        self.state_count = state_count
        self.char_count = char_count
        self.reset()

    def reset(self) -> None:
        """Forget all history."""
        self.records = [UndoRecord() for _ in range(self.state_count)]
        self.chars = [""] * self.char_count
        self.undo_point = 0
        self.redo_point = self.state_count
        self.undo_char_point = 0
        self.redo_char_point = self.char_count

    @property
    def can_undo(self) -> bool:
        return self.undo_point > 0

    @property
    def can_redo(self) -> bool:
        return self.redo_point < self.state_count

    def flush_redo(self) -> None:
        """Drop every redo record."""
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def discard_undo(self) -> None:
        """Drop the oldest undo record."""
        if self.undo_point == 0:
            return
        oldest = self.records[0]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.undo_char_point -= n
            self.chars[: self.undo_char_point] = self.chars[n : n + self.undo_char_point]
            for record in self.records[: self.undo_point]:
                if record.char_storage >= 0:
                    record.char_storage -= n
        self.undo_point -= 1
        del self.records[0]
        self.records.insert(self.undo_point, UndoRecord())

    def discard_redo(self) -> None:
        """Drop the oldest redo record to make room in the character pool."""
        last = self.state_count - 1
        if self.redo_point > last:
            return
        oldest = self.records[last]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.redo_char_point += n
            start = self.redo_char_point
            self.chars[start:] = self.chars[start - n : self.char_count - n]
            for record in self.records[self.redo_point : last]:
                if record.char_storage >= 0:
                    record.char_storage += n
        del self.records[last]
        self.records.insert(self.redo_point, UndoRecord())
        self.redo_point += 1

    def _create_record(self, numchars: int) -> UndoRecord | None:
        self.flush_redo()
        if self.undo_point == self.state_count:
            self.discard_undo()
        if numchars > self.char_count:
            self.undo_point = 0
            self.undo_char_point = 0
            return None
        while self.undo_char_point + numchars > self.char_count:
            self.discard_undo()
        record = self.records[self.undo_point]
        self.undo_point += 1
        return record

    def create_undo(self, pos: int, insert_len: int, delete_len: int) -> int | None:
        """Push an undo record; return the pool offset for its characters, if any."""
        record = self._create_record(insert_len)
        if record is None:
            return None
        record.where = pos
        record.insert_length = insert_len
        record.delete_length = delete_len
        if insert_len == 0:
            record.char_storage = -1
            return None
        record.char_storage = self.undo_char_point
        self.undo_char_point += insert_len
        return record.char_storage

    def make_undo_insert(self, where: int, length: int) -> None:
        """Record that ``length`` characters are about to be inserted at ``where``."""
        self.create_undo(where, 0, length)

    def make_undo_delete(self, buffer: EditableText, where: int, length: int) -> None:
        """Record the ``length`` characters at ``where`` before they are deleted."""
        offset = self.create_undo(where, length, 0)
        if offset is not None:
            self.chars[offset : offset + length] = _read(buffer, where, length)

    def make_undo_replace(
        self, buffer: EditableText, where: int, old_length: int, new_length: int
    ) -> None:
        """Record a replacement of ``old_length`` chars by ``new_length`` chars."""
        offset = self.create_undo(where, old_length, new_length)
        if offset is not None:
            self.chars[offset : offset + old_length] = _read(buffer, where, old_length)

    def undo(self, buffer: EditableText) -> int | None:
        """Revert the latest edit; return the new cursor position or None."""
        if self.undo_point == 0:
            return None
        u = replace(self.records[self.undo_point - 1])
        redo_insert = u.delete_length
        redo_storage = -1

        if u.delete_length:
            if self.undo_char_point + u.delete_length >= self.char_count:
                redo_insert = 0
            else:
                while self.undo_char_point + u.delete_length > self.redo_char_point:
                    if self.redo_point == self.state_count:
                        return None
                    self.discard_redo()
                redo_storage = self.redo_char_point - u.delete_length
                self.redo_char_point = redo_storage
                self.chars[redo_storage : redo_storage + u.delete_length] = _read(
                    buffer, u.where, u.delete_length
                )
            buffer.delete(u.where, u.delete_length)

        redo = self.records[self.redo_point - 1]
        redo.where = u.where
        redo.insert_length = redo_insert
        redo.delete_length = u.insert_length
        redo.char_storage = redo_storage

        if u.insert_length:
            start = u.char_storage
            buffer.insert(u.where, self.chars[start : start + u.insert_length])
            self.undo_char_point -= u.insert_length

        self.undo_point -= 1
        self.redo_point -= 1
        return u.where + u.insert_length

    def redo(self, buffer: EditableText) -> int | None:
        """Reapply the latest undone edit; return the new cursor position or None."""
        if self.redo_point == self.state_count:
            return None
        u = self.records[self.undo_point]
        r = replace(self.records[self.redo_point])

        u.delete_length = r.insert_length
        u.insert_length = r.delete_length
        u.where = r.where
        u.char_storage = -1

        if r.delete_length:
            if self.undo_char_point + u.insert_length > self.redo_char_point:
                u.insert_length = 0
                u.delete_length = 0
            else:
                u.char_storage = self.undo_char_point
                self.undo_char_point += u.insert_length
                self.chars[u.char_storage : u.char_storage + u.insert_length] = _read(
                    buffer, u.where, u.insert_length
                )
            buffer.delete(r.where, r.delete_length)

        if r.insert_length:
            start = r.char_storage
            buffer.insert(r.where, self.chars[start : start + r.insert_length])
            self.redo_char_point += r.insert_length

        self.undo_point += 1
        self.redo_point += 1
        return r.where + r.insert_length