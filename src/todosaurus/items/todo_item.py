"""TODO item parsing and in-place rewriting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from todosaurus.contracts.document import RangeMarker

NEW_ITEM_PATTERN = re.compile(r"\b(?i:TODO)\b:?(?!\[.*?])")
REPORTED_ITEM_PATTERN = re.compile(r"\b(?i:TODO)\[#(?P<number>[1-9][0-9]*)]")

ISSUE_DESCRIPTION_PLACEHOLDER = "${GITHUB_CODE_URL_REPLACEMENT}"
ISSUE_DESCRIPTION_TEMPLATE = (
    f"See the code near this line: {ISSUE_DESCRIPTION_PLACEHOLDER}\n"
    "\n"
    "Also, look for the number of this issue in the project code base."
)


def reported_marker(issue_number: int) -> str:
    if issue_number <= 0:
        raise ValueError(f"issue number must be positive, got {issue_number}")
    return f"TODO[#{issue_number}]:"


@dataclass(frozen=True)
class SourceLocation:
    path: Path | None
    line: int


class ToDoItem:
    """A TODO comment span inside a document.

    ``title`` and ``description`` are captured when the item is created, i.e.
    at scan time; ``is_new`` and ``issue_number`` always read the live text.
    """

    def __init__(self, range_marker: RangeMarker) -> None:
        self.range = range_marker
        text = self.text
        first_line, newline, rest = text.partition("\n")
        self.title = NEW_ITEM_PATTERN.sub("", first_line).strip()
        self.description = (rest + "\n" if newline else "") + ISSUE_DESCRIPTION_TEMPLATE

    @property
    def text(self) -> str:
        return self.range.text

    @property
    def location(self) -> SourceLocation:
        document = self.range.document
        return SourceLocation(path=document.path, line=document.line_of(self.range.start))

    @property
    def issue_number(self) -> int | None:
        match = REPORTED_ITEM_PATTERN.search(self.text)
        if match is None:
            return None
        return int(match.group("number"))

    def is_new(self) -> bool:
        return NEW_ITEM_PATTERN.search(self.text) is not None

    def mark_as_reported(self, issue_number: int) -> None:
        """Rewrite the marker to reference *issue_number*.

        Must be called inside a write transaction on the owning document.
        """
        if not self.is_new():
            return

        new_text = NEW_ITEM_PATTERN.sub(reported_marker(issue_number), self.text, count=1)
        self.range.document.atomic_replace(self.range.start, self.range.end, new_text)

    def __repr__(self) -> str:
        return f"ToDoItem(title={self.title!r}, range={self.range!r})"
