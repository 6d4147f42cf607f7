"""Text document contract.

Todosaurus never touches an editor buffer directly. Anything that owns text
(an in-memory buffer, a file on disk, an editor integration) implements
:class:`TextDocument`, and TODO items hold :class:`RangeMarker` objects whose
offsets the document keeps current as edits land.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from pathlib import Path


class RangeMarker:
    """A live ``[start, end)`` range inside a document.

    The owning document shifts the offsets whenever an edit happens before or
    inside the range.
    """

    def __init__(self, document: TextDocument, start: int, end: int) -> None:
        if not 0 <= start <= end:
            raise ValueError(f"invalid range [{start}, {end})")
        self.document = document
        self.start = start
        self.end = end

    @property
    def text(self) -> str:
        return self.document.get_text(self.start, self.end)

    def __repr__(self) -> str:
        return f"RangeMarker(start={self.start}, end={self.end})"


class TextDocument(ABC):
    @property
    @abstractmethod
    def path(self) -> Path | None: ...  # pragma: no cover

    @property
    @abstractmethod
    def text(self) -> str: ...  # pragma: no cover

    @abstractmethod
    def atomic_replace(self, start: int, end: int, new_text: str) -> None:
        """Replace ``[start, end)`` with *new_text*.

        Only legal inside :meth:`transaction`.
        """

    @abstractmethod
    def create_range_marker(self, start: int, end: int) -> RangeMarker: ...  # pragma: no cover

    @abstractmethod
    def transaction(self, name: str) -> AbstractContextManager[None]:
        """Group the edits made inside the block into one named, undoable unit."""

    @abstractmethod
    def undo(self) -> str | None:
        """Revert the most recent transaction and return its name."""

    def get_text(self, start: int, end: int) -> str:
        return self.text[start:end]

    def line_of(self, offset: int) -> int:
        """1-based line number containing *offset*."""
        return self.text.count("\n", 0, offset) + 1
