"""Per-project TODO orchestration: create issues and open reported ones."""

from __future__ import annotations

import asyncio
import logging
import webbrowser
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from rich.console import Console

from todosaurus.concurrency import DocumentDispatcher
from todosaurus.contracts.config import TodosaurusConfig
from todosaurus.contracts.exceptions import (
    ConfigError,
    CredentialsNotFoundError,
    IssueNotFoundError,
    IssueTrackerNotFoundError,
    MissingCredentialsIdError,
    UserChoiceError,
    WizardStateError,
)
from todosaurus.contracts.notifications import Notifier, NullNotifier
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import Credentials, IssueTracker, PlacementDetails
from todosaurus.git import detect_placement
from todosaurus.items.todo_item import ToDoItem
from todosaurus.memoization.store import UserChoice, UserChoiceStore
from todosaurus.trackers.provider import IssueTrackerProvider
from todosaurus.wizard.builder import TodosaurusWizardBuilder
from todosaurus.wizard.context import IssueTrackerConnectionDetails, TodosaurusWizardContext, WizardResult
from todosaurus.wizard.steps import ChooseIssueTrackerStep, CreateNewIssueStep

_LOG = logging.getLogger(__name__)

CREATE_NEW_ISSUE_TITLE = "Create New Issue"
OPEN_REPORTED_ISSUE_TITLE = "Open Reported Issue in Browser"
OPEN_REPORTED_ISSUE_BUTTON = "Open in Browser"
UPDATE_TODO_ITEM_COMMAND = "Update TODO Item"


class ToDoService:
    """Entry points for TODO items of one project.

    Each operation runs as its own :class:`asyncio.Task`; :meth:`aclose`
    cancels whatever is still in flight.
    """

    def __init__(
        self,
        project: Project,
        *,
        provider: IssueTrackerProvider,
        store: UserChoiceStore,
        notifier: Notifier | None = None,
        dispatcher: DocumentDispatcher | None = None,
        browse: Callable[[str], object] = webbrowser.open,
        console: Console | None = None,
        placement_detector: Callable[[Path], PlacementDetails | None] = detect_placement,
        wizard_factory: Callable[..., TodosaurusWizardBuilder] = TodosaurusWizardBuilder,
    ) -> None:
        self._project = project
        self._provider = provider
        self._store = store
        self._notifier = notifier or NullNotifier()
        self._owns_dispatcher = dispatcher is None
        self._dispatcher = dispatcher or DocumentDispatcher()
        self._browse = browse
        self._console = console or Console(stderr=True)
        self._placement_detector = placement_detector
        self._wizard_factory = wizard_factory
        self._tasks: set[asyncio.Task[WizardResult]] = set()
        self._closed = False

    @classmethod
    def for_project(
        cls,
        project: Project,
        config: TodosaurusConfig,
        *,
        notifier: Notifier | None = None,
        console: Console | None = None,
    ) -> ToDoService:
        return cls(
            project,
            provider=IssueTrackerProvider.from_config(config),
            store=UserChoiceStore.for_project(project, config),
            notifier=notifier,
            console=console,
        )

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def create_new_issue(self, todo_item: ToDoItem) -> asyncio.Task[WizardResult]:
        return self._launch(self._create_new_issue_flow(todo_item), name="todosaurus-create-new-issue")

    def open_reported_issue_in_browser(self, todo_item: ToDoItem) -> asyncio.Task[WizardResult]:
        return self._launch(self._open_reported_issue_flow(todo_item), name="todosaurus-open-reported-issue")

    async def retrieve_wizard_context_based_on_user_choice(
        self, todo_item: ToDoItem, user_choice: UserChoice
    ) -> TodosaurusWizardContext:
        credentials_id = user_choice.credentials_id
        if not credentials_id:
            raise MissingCredentialsIdError()

        issue_tracker = None
        if user_choice.issue_tracker_id:
            issue_tracker = self._provider.provide_by_repository_name(user_choice.issue_tracker_id)
        if issue_tracker is None:
            raise IssueTrackerNotFoundError(user_choice.issue_tracker_id)

        credentials = await issue_tracker.create_credentials_provider().provide(credentials_id)
        if credentials is None:
            raise CredentialsNotFoundError(credentials_id)

        connection_details = IssueTrackerConnectionDetails(issue_tracker=issue_tracker, credentials=credentials)
        return TodosaurusWizardContext(todo_item, connection_details, user_choice.placement_details)

    async def aclose(self) -> None:
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        if self._owns_dispatcher:
            self._dispatcher.shutdown()

    async def __aenter__(self) -> ToDoService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    async def _create_new_issue_flow(self, todo_item: ToDoItem) -> WizardResult:
        try:
            saved_choice = self._store.get_choice_or_null()
            resolved = None
            if saved_choice is not None:
                resolved = await self.retrieve_wizard_context_based_on_user_choice(todo_item, saved_choice)
        except (ConfigError, UserChoiceError) as exc:
            _LOG.debug("Saved choice unusable: %s", exc)
            self._notifier.create_new_issue_failed(exc)
            return WizardResult.FAILED

        if resolved is not None:
            return await (
                self._wizard_builder(resolved, remember=False)
                .set_title(CREATE_NEW_ISSUE_TITLE)
                .add_step(CreateNewIssueStep(self._project, console=self._console))
                .set_final_action(self._create_new_issue)
                .build()
                .show()
            )

        model = TodosaurusWizardContext(todo_item)
        return await (
            self._wizard_builder(model, remember=True)
            .set_title(CREATE_NEW_ISSUE_TITLE)
            .add_step(self._choose_issue_tracker_step())
            .add_step(CreateNewIssueStep(self._project, console=self._console))
            .set_final_action(self._create_new_issue)
            .build()
            .show()
        )

    async def _open_reported_issue_flow(self, todo_item: ToDoItem) -> WizardResult:
        try:
            issue_number = await self._dispatcher.read_action(lambda: todo_item.issue_number)
            if issue_number is None:
                raise WizardStateError("Issue number must be specified")
            saved_choice = self._store.get_choice_or_null()
            resolved = None
            if saved_choice is not None:
                resolved = await self.retrieve_wizard_context_based_on_user_choice(todo_item, saved_choice)
        except (ConfigError, UserChoiceError, WizardStateError) as exc:
            self._notifier.open_reported_issue_failed(exc)
            return WizardResult.FAILED

        if resolved is not None:
            return await self._open_reported_issue_in_browser(resolved)

        model = TodosaurusWizardContext(todo_item)
        return await (
            self._wizard_builder(model, remember=True)
            .set_title(OPEN_REPORTED_ISSUE_TITLE)
            .set_final_button_name(OPEN_REPORTED_ISSUE_BUTTON)
            .add_step(self._choose_issue_tracker_step())
            .set_final_action(self._open_reported_issue_in_browser)
            .build()
            .show()
        )

    # ------------------------------------------------------------------
    # Final actions
    # ------------------------------------------------------------------

    async def _create_new_issue(self, model: TodosaurusWizardContext) -> WizardResult:
        try:
            issue_tracker, credentials, placement_details = _require_connection(model)
            location = await self._dispatcher.read_action(lambda: model.todo_item.location)

            async with issue_tracker.create_client(self._project, credentials, placement_details) as client:
                new_issue = await client.create_issue(model.todo_item, location)
            _LOG.debug("Created issue #%d on %s", new_issue.number, issue_tracker.title)

            item = model.todo_item
            await self._dispatcher.write_action(
                item.range.document,
                UPDATE_TODO_ITEM_COMMAND,
                lambda: self._mark_as_reported(item, new_issue.number),
            )

            self._notifier.create_new_issue_succeeded(new_issue)
            return WizardResult.SUCCESS
        except Exception as exc:
            _LOG.debug("Issue creation failed", exc_info=True)
            self._notifier.create_new_issue_failed(exc)
            return WizardResult.FAILED

    async def _open_reported_issue_in_browser(self, model: TodosaurusWizardContext) -> WizardResult:
        try:
            issue_tracker, credentials, placement_details = _require_connection(model)

            issue_number = await self._dispatcher.read_action(lambda: model.todo_item.issue_number)
            if issue_number is None:
                raise WizardStateError("Issue number must be specified")

            async with issue_tracker.create_client(self._project, credentials, placement_details) as client:
                issue = await client.get_issue(model.todo_item, issue_number)
            if issue is None:
                raise IssueNotFoundError(tracker_title=issue_tracker.title, issue_number=issue_number)

            await asyncio.to_thread(self._browse, issue.url)
            return WizardResult.SUCCESS
        except Exception as exc:
            _LOG.debug("Opening reported issue failed", exc_info=True)
            self._notifier.open_reported_issue_failed(exc)
            return WizardResult.FAILED

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _mark_as_reported(self, todo_item: ToDoItem, issue_number: int) -> None:
        # Runs on the document thread; raising here rolls the transaction back.
        if self._closed:
            raise asyncio.CancelledError()
        todo_item.mark_as_reported(issue_number)

    def _wizard_builder(self, model: TodosaurusWizardContext, *, remember: bool) -> TodosaurusWizardBuilder:
        return self._wizard_factory(
            self._project,
            model,
            store=self._store if remember else None,
            console=self._console,
        )

    def _choose_issue_tracker_step(self) -> ChooseIssueTrackerStep:
        return ChooseIssueTrackerStep(
            self._project,
            self._provider,
            console=self._console,
            placement_detector=self._placement_detector,
        )

    def _launch(self, flow: Coroutine[Any, Any, WizardResult], *, name: str) -> asyncio.Task[WizardResult]:
        if self._closed:
            flow.close()
            raise RuntimeError("ToDoService is closed")
        task = asyncio.get_running_loop().create_task(flow, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


def _require_connection(model: TodosaurusWizardContext) -> tuple[IssueTracker, Credentials, PlacementDetails]:
    issue_tracker = model.connection_details.issue_tracker
    if issue_tracker is None:
        raise WizardStateError("Issue tracker must be specified")

    credentials = model.connection_details.credentials
    if credentials is None:
        raise WizardStateError("Credentials must be specified")

    placement_details = model.placement_details
    if placement_details is None:
        raise WizardStateError("Placement details must be specified")

    return issue_tracker, credentials, placement_details
