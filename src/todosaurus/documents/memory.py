"""In-memory text document with live range markers and undoable transactions."""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from todosaurus.contracts.document import RangeMarker, TextDocument
from todosaurus.contracts.exceptions import DocumentError

_LOG = logging.getLogger(__name__)


@dataclass
class _Edit:
    start: int
    old_text: str
    new_text: str


@dataclass
class _Transaction:
    name: str
    edits: list[_Edit] = field(default_factory=list)


class InMemoryDocument(TextDocument):
    def __init__(self, text: str = "", *, path: Path | None = None) -> None:
        self._text = text
        self._path = path
        self._lock = threading.RLock()
        self._markers: weakref.WeakSet[RangeMarker] = weakref.WeakSet()
        self._undo_stack: list[_Transaction] = []
        self._active: _Transaction | None = None
        self._depth = 0

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    def create_range_marker(self, start: int, end: int) -> RangeMarker:
        with self._lock:
            if end > len(self._text):
                raise DocumentError(f"range [{start}, {end}) exceeds document length {len(self._text)}")
            marker = RangeMarker(self, start, end)
            self._markers.add(marker)
            return marker

    def atomic_replace(self, start: int, end: int, new_text: str) -> None:
        with self._lock:
            if self._active is None:
                raise DocumentError("documents can only be modified inside a transaction")
            if not 0 <= start <= end <= len(self._text):
                raise DocumentError(f"range [{start}, {end}) is outside the document")
            old_text = self._text[start:end]
            self._apply(start, end, new_text)
            self._active.edits.append(_Edit(start=start, old_text=old_text, new_text=new_text))

    @contextmanager
    def transaction(self, name: str) -> Iterator[None]:
        with self._lock:
            if self._active is not None:
                # Nested blocks join the outer unit.
                self._depth += 1
                try:
                    yield
                finally:
                    self._depth -= 1
                return

            self._active = _Transaction(name=name)
            try:
                yield
            except BaseException:
                self._revert(self._active)
                raise
            else:
                if self._active.edits:
                    try:
                        self._on_commit()
                    except BaseException:
                        self._revert(self._active)
                        raise
                    self._undo_stack.append(self._active)
                    _LOG.debug("Committed %r (%d edits)", name, len(self._active.edits))
            finally:
                self._active = None

    def undo(self) -> str | None:
        with self._lock:
            if self._active is not None:
                raise DocumentError("cannot undo while a transaction is open")
            if not self._undo_stack:
                return None
            unit = self._undo_stack.pop()
            self._revert(unit)
            self._on_commit()
            return unit.name

    def _revert(self, unit: _Transaction) -> None:
        for edit in reversed(unit.edits):
            self._apply(edit.start, edit.start + len(edit.new_text), edit.old_text)

    def _apply(self, start: int, end: int, new_text: str) -> None:
        self._text = self._text[:start] + new_text + self._text[end:]
        delta = len(new_text) - (end - start)
        for marker in list(self._markers):
            _shift_marker(marker, start, end, len(new_text), delta)

    def _on_commit(self) -> None:
        """Hook for subclasses that persist the text once a unit is committed."""


def _shift_marker(marker: RangeMarker, start: int, end: int, inserted: int, delta: int) -> None:
    if marker.end <= start and not (marker.start == marker.end == start):
        return
    if marker.start >= end:
        marker.start += delta
        marker.end += delta
        return
    if marker.start <= start and end <= marker.end:
        marker.end += delta
        return
    new_start = min(marker.start, start)
    new_end = marker.end + delta if marker.end >= end else start + inserted
    marker.start = new_start
    marker.end = max(new_start, new_end)
