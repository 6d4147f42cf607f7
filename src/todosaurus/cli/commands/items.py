"""Report/open command handlers."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.console import Console

from todosaurus.cli.notifications import RichNotifier
from todosaurus.config import load_project_config
from todosaurus.contracts.config import TodosaurusConfig
from todosaurus.contracts.project import Project
from todosaurus.documents.file import FileDocument
from todosaurus.items.scanner import find_item_at_line
from todosaurus.items.todo_item import ToDoItem
from todosaurus.service import ToDoService
from todosaurus.wizard.context import WizardResult


def _load_item(args: argparse.Namespace, config: TodosaurusConfig) -> ToDoItem | None:
    document = FileDocument.load(args.file, encoding=config.encoding)
    item = find_item_at_line(document, args.line)
    if item is None:
        print(f"error: no TODO item at {args.file}:{args.line}", file=sys.stderr)
    return item


async def _create(service: ToDoService, item: ToDoItem) -> WizardResult:
    async with service:
        return await service.create_new_issue(item)


async def _open(service: ToDoService, item: ToDoItem) -> WizardResult:
    async with service:
        return await service.open_reported_issue_in_browser(item)


def run_report(args: argparse.Namespace, *, console: Console | None = None) -> int:
    project = Project(Path(args.project_root).resolve())
    config = load_project_config(project.root)
    item = _load_item(args, config)
    if item is None:
        return 2
    if not item.is_new():
        print(f"error: TODO item is already reported as #{item.issue_number}", file=sys.stderr)
        return 2

    console = console or Console(stderr=True)
    service = ToDoService.for_project(project, config, notifier=RichNotifier(console), console=console)
    result = asyncio.run(_create(service, item))
    return 0 if result is WizardResult.SUCCESS else 4


def run_open(args: argparse.Namespace, *, console: Console | None = None) -> int:
    project = Project(Path(args.project_root).resolve())
    config = load_project_config(project.root)
    item = _load_item(args, config)
    if item is None:
        return 2

    console = console or Console(stderr=True)
    service = ToDoService.for_project(project, config, notifier=RichNotifier(console), console=console)
    result = asyncio.run(_open(service, item))
    return 0 if result is WizardResult.SUCCESS else 4


__all__ = ["run_open", "run_report"]
