"""Scan command handler."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterator
from pathlib import Path

from rich.console import Console
from rich.table import Table

from todosaurus.config import load_project_config
from todosaurus.contracts.exceptions import DocumentError
from todosaurus.documents.file import FileDocument
from todosaurus.items.scanner import find_todo_items

_LOG = logging.getLogger(__name__)

_SKIPPED_DIRS = {"node_modules", "__pycache__", "venv", "build", "dist"}


def iter_files(paths: list[Path]) -> Iterator[Path]:
    for path in paths:
        if path.is_file():
            yield path
            continue
        for candidate in sorted(path.rglob("*")):
            relative_parts = candidate.relative_to(path).parts
            if any(part.startswith(".") or part in _SKIPPED_DIRS for part in relative_parts[:-1]):
                continue
            if candidate.is_file() and not candidate.name.startswith("."):
                yield candidate


def run_scan(args: argparse.Namespace, *, console: Console | None = None) -> int:
    console = console or Console()
    root = Path(args.project_root).resolve()
    config = load_project_config(root)

    table = Table("Location", "State", "Issue", "Title")
    count = 0
    for file_path in iter_files([Path(p) for p in args.paths]):
        try:
            document = FileDocument.load(file_path, encoding=config.encoding)
        except DocumentError as exc:
            _LOG.debug("Skipping %s: %s", file_path, exc)
            continue
        for item in find_todo_items(document):
            is_new = item.is_new()
            if args.new_only and not is_new:
                continue
            issue_number = item.issue_number
            table.add_row(
                f"{file_path}:{item.location.line}",
                "new" if is_new else "reported",
                f"#{issue_number}" if issue_number is not None else "",
                item.title,
            )
            count += 1

    if count:
        console.print(table)
    else:
        console.print("No TODO items found.")
    return 0


__all__ = ["iter_files", "run_scan"]
