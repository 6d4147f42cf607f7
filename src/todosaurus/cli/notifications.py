"""Rich-based notifications for terminal use."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from todosaurus.contracts.notifications import Notifier
from todosaurus.contracts.tracker import Issue


class RichNotifier(Notifier):
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def create_new_issue_succeeded(self, issue: Issue) -> None:
        self._console.print(f"[green]✓[/green] Issue [bold]#{issue.number}[/bold] created: {escape(issue.url)}")

    def create_new_issue_failed(self, error: BaseException) -> None:
        self._console.print(f"[red]✗[/red] Unable to create issue: {escape(str(error))}")

    def open_reported_issue_failed(self, error: BaseException) -> None:
        self._console.print(f"[red]✗[/red] Unable to open reported issue: {escape(str(error))}")
