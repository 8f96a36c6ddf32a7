"""A last-in, first-out record of registry operations that can be undone."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """Kinds of operation recorded on the undo stack."""

    ASSIGN = "a"
    WITHDRAW = "w"
    UPDATE = "u"


@dataclass(frozen=True)
class UndoEntry:
    """One recorded operation and the data needed to reverse it."""

    operation: Operation
    employee: str
    project: str
    priority: int


class UndoStackEmpty(IndexError):
    """Raised when popping from an empty undo stack."""

    def __init__(self, message: str = "The undo stack is empty.") -> None:
        super().__init__(message)


class UndoStack:
    """Stack of undoable operations, most recent on top."""

    def __init__(self) -> None:
        self._entries: list[UndoEntry] = []

    def push(self, operation: Operation | str, employee: str, project: str, priority: int) -> UndoEntry:
        """Record an operation and return the stored entry."""
        entry = UndoEntry(Operation(operation), employee, project, priority)
        self._entries.append(entry)
        return entry

    def pop(self) -> UndoEntry:
        """Remove and return the most recent entry."""
        if not self._entries:
            raise UndoStackEmpty()
        return self._entries.pop()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Discard every recorded entry."""
        self._entries.clear()