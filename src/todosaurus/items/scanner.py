"""Find TODO comment spans in a document."""

from __future__ import annotations

import re

from todosaurus.contracts.document import TextDocument
from todosaurus.items.todo_item import ToDoItem

_KEYWORD_RE = re.compile(r"\b(?i:TODO)\b")

# Longest first so "//" wins over a hypothetical "/" and "/*" over "*".
_COMMENT_TOKENS = ("<!--", "/*", "//", "--", "#", ";", "*")


def _comment_token(prefix: str) -> str | None:
    stripped = prefix.rstrip()
    for token in _COMMENT_TOKENS:
        if stripped.endswith(token):
            return token
    return None


def _is_continuation(line: str, token: str, keyword_column: int) -> bool:
    body = line.lstrip()
    if not body.startswith(token) or _KEYWORD_RE.search(line):
        return False
    content = body[len(token) :]
    if not content.strip():
        return False
    content_column = len(line) - len(content.lstrip())
    return content_column > keyword_column


def find_todo_items(document: TextDocument) -> list[ToDoItem]:
    """Return one :class:`ToDoItem` per line carrying a TODO keyword."""
    text = document.text
    lines = text.splitlines(keepends=True)
    items: list[ToDoItem] = []

    offset = 0
    line_offsets: list[int] = []
    for line in lines:
        line_offsets.append(offset)
        offset += len(line)

    index = 0
    while index < len(lines):
        line = lines[index].rstrip("\r\n")
        match = _KEYWORD_RE.search(line)
        if match is None:
            index += 1
            continue

        start = line_offsets[index] + match.start()
        end = line_offsets[index] + len(line)
        token = _comment_token(line[: match.start()])

        following = index + 1
        if token is not None:
            while following < len(lines):
                candidate = lines[following].rstrip("\r\n")
                if not _is_continuation(candidate, token, match.start()):
                    break
                end = line_offsets[following] + len(candidate)
                following += 1

        items.append(ToDoItem(document.create_range_marker(start, end)))
        index = following

    return items


def find_item_at_line(document: TextDocument, line: int) -> ToDoItem | None:
    """Return the item whose span covers 1-based *line*."""
    for item in find_todo_items(document):
        first = document.line_of(item.range.start)
        last = document.line_of(item.range.end)
        if first <= line <= last:
            return item
    return None
