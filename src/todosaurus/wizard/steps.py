"""Interactive wizard steps backed by questionary."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from todosaurus.auth.factory import parse_credentials_id
from todosaurus.contracts.exceptions import AuthenticationError
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import PlacementDetails
from todosaurus.git import detect_placement
from todosaurus.trackers.provider import IssueTrackerProvider
from todosaurus.wizard.context import TodosaurusWizardContext

_LOG = logging.getLogger(__name__)


class WizardStep(ABC):
    title: str

    @abstractmethod
    async def run(self, model: TodosaurusWizardContext) -> bool:
        """Collect this step's input into *model*; ``False`` means the user backed out."""


def _validate_credentials_id(value: str) -> bool | str:
    try:
        parse_credentials_id(value)
    except AuthenticationError as exc:
        return str(exc)
    return True


def _validate_repository(value: str) -> bool | str:
    owner, separator, repository = value.strip().rpartition("/")
    if not separator or not owner or not repository:
        return "Use repository format owner/name"
    return True


class ChooseIssueTrackerStep(WizardStep):
    title = "Choose issue tracker"

    def __init__(
        self,
        project: Project,
        provider: IssueTrackerProvider,
        *,
        console: Console | None = None,
        placement_detector: Callable[[Path], PlacementDetails | None] = detect_placement,
    ) -> None:
        self._project = project
        self._provider = provider
        self._console = console or Console(stderr=True)
        self._placement_detector = placement_detector

    async def run(self, model: TodosaurusWizardContext) -> bool:
        import questionary

        trackers = {tracker.id: tracker for tracker in self._provider.provide_all()}
        if not trackers:
            self._console.print("[red]No issue trackers are available.[/red]")
            return False

        tracker_id = await questionary.select(
            "Issue tracker:",
            choices=[questionary.Choice(f"{tracker.icon} {tracker.title}", value=tracker.id) for tracker in trackers.values()],
        ).ask_async()
        if tracker_id is None:
            return False
        issue_tracker = trackers[tracker_id]

        credentials_id = await questionary.text(
            "Credentials identifier (env:VAR, gh-cli:HOST, glab-cli:HOST):",
            default=issue_tracker.default_credentials_id,
            validate=_validate_credentials_id,
        ).ask_async()
        if credentials_id is None:
            return False
        credentials_id = credentials_id.strip()
        credentials = await issue_tracker.create_credentials_provider().provide(credentials_id)
        if credentials is None:
            self._console.print(f'[red]Unable to find credentials with "{escape(credentials_id)}" identifier.[/red]')
            return False

        detected = await asyncio.to_thread(self._placement_detector, self._project.root)
        repository = await questionary.text(
            "Repository (owner/name):",
            default=detected.slug if detected is not None else "",
            validate=_validate_repository,
        ).ask_async()
        if repository is None:
            return False
        server_url = await questionary.text(
            "Server URL:",
            default=detected.server_url if detected is not None else issue_tracker.default_server_url,
        ).ask_async()
        if server_url is None:
            return False
        remember = await questionary.confirm("Remember this choice for the project?", default=True).ask_async()
        if remember is None:
            return False

        owner, _, name = repository.strip().rpartition("/")
        model.connection_details.issue_tracker = issue_tracker
        model.connection_details.credentials = credentials
        model.placement_details = PlacementDetails(
            owner=owner,
            repository=name,
            server_url=server_url.strip().rstrip("/") or issue_tracker.default_server_url,
        )
        model.remember_choice = bool(remember)
        _LOG.debug("Chose %s at %s", issue_tracker.id, model.placement_details.slug)
        return True


class CreateNewIssueStep(WizardStep):
    title = "Describe new issue"

    def __init__(self, project: Project, *, console: Console | None = None) -> None:
        self._project = project
        self._console = console or Console(stderr=True)

    async def run(self, model: TodosaurusWizardContext) -> bool:
        import questionary

        item = model.todo_item
        title = await questionary.text(
            "Issue title:",
            default=item.title,
            validate=lambda v: len(v.strip()) > 0 or "Title is required",
        ).ask_async()
        if title is None:
            return False
        item.title = title.strip()

        tracker = model.connection_details.issue_tracker
        placement = model.placement_details
        subtitle = None
        if tracker is not None and placement is not None:
            subtitle = f"{tracker.icon} {tracker.title} · {placement.slug}"
        self._console.print(Panel(Text(item.description), title=Text(item.title), subtitle=subtitle))
        return True
