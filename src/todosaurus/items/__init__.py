"""TODO items and scanning."""

from todosaurus.items.scanner import find_item_at_line, find_todo_items
from todosaurus.items.todo_item import (
    ISSUE_DESCRIPTION_PLACEHOLDER,
    ISSUE_DESCRIPTION_TEMPLATE,
    SourceLocation,
    ToDoItem,
    reported_marker,
)

__all__ = [
    "ISSUE_DESCRIPTION_PLACEHOLDER",
    "ISSUE_DESCRIPTION_TEMPLATE",
    "SourceLocation",
    "ToDoItem",
    "find_item_at_line",
    "find_todo_items",
    "reported_marker",
]
