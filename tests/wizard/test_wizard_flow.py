from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path

import pytest
from rich.console import Console

from tests.fakes.questionary import build_fake_questionary
from tests.fakes.tracker import FakeIssueTracker
from todosaurus.contracts.exceptions import ConfigError
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import Credentials, PlacementDetails
from todosaurus.documents.memory import InMemoryDocument
from todosaurus.items.scanner import find_todo_items
from todosaurus.memoization.store import UserChoice, UserChoiceStore
from todosaurus.trackers.provider import IssueTrackerProvider
from todosaurus.wizard.builder import TodosaurusWizardBuilder
from todosaurus.wizard.context import IssueTrackerConnectionDetails, TodosaurusWizardContext, WizardResult
from todosaurus.wizard.steps import ChooseIssueTrackerStep, CreateNewIssueStep

_SLOW_PATH_ANSWERS = {
    "Issue tracker": "GitHub",
    "Credentials identifier": "gh-cli:github.com",
    "Repository": "owner/repo",
    "Server URL": "https://github.com/",
    "Remember": True,
}


def _model() -> TodosaurusWizardContext:
    (item,) = find_todo_items(InMemoryDocument("# TODO: fix the parser\n"))
    return TodosaurusWizardContext(item)


class _RecordingAction:
    def __init__(self, result: WizardResult = WizardResult.SUCCESS) -> None:
        self.result = result
        self.models: list[TodosaurusWizardContext] = []

    async def __call__(self, model: TodosaurusWizardContext) -> WizardResult:
        self.models.append(model)
        return self.result


def test_builder_requires_steps_and_final_action(project: Project) -> None:
    builder = TodosaurusWizardBuilder(project, _model())

    with pytest.raises(ValueError, match="at least one step"):
        builder.build()

    builder.add_step(CreateNewIssueStep(project))
    with pytest.raises(ValueError, match="final action"):
        builder.build()


def test_builder_defaults(project: Project) -> None:
    wizard = (
        TodosaurusWizardBuilder(project, _model())
        .add_step(CreateNewIssueStep(project))
        .set_final_action(_RecordingAction())
        .build()
    )

    assert wizard.title == project.name
    assert wizard.final_button_name == "Create"


@pytest.mark.asyncio
async def test_choose_step_fills_model(
    monkeypatch: pytest.MonkeyPatch,
    project: Project,
    tracker_provider: IssueTrackerProvider,
    fake_tracker: FakeIssueTracker,
    quiet_console: Console,
) -> None:
    asked: list[str] = []
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(_SLOW_PATH_ANSWERS, asked=asked))
    model = _model()
    step = ChooseIssueTrackerStep(project, tracker_provider, console=quiet_console, placement_detector=lambda root: None)

    assert await step.run(model) is True

    assert model.connection_details.issue_tracker is fake_tracker
    assert model.connection_details.credentials == Credentials(id="gh-cli:github.com", token="tok_123")
    assert model.placement_details == PlacementDetails(owner="owner", repository="repo", server_url="https://github.com")
    assert model.remember_choice is True
    assert [prompt.split(" ")[0] for prompt in asked] == ["Issue", "Credentials", "Repository", "Server", "Remember"]


@pytest.mark.asyncio
async def test_choose_step_detects_placement_off_the_event_loop(
    monkeypatch: pytest.MonkeyPatch,
    project: Project,
    tracker_provider: IssueTrackerProvider,
    quiet_console: Console,
) -> None:
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(_SLOW_PATH_ANSWERS))
    detected_in: list[Path] = []

    def _slow_detector(root: Path) -> None:
        detected_in.append(root)
        time.sleep(0.5)

    ticks = 0
    done = asyncio.Event()

    async def _ticker() -> None:
        nonlocal ticks
        while not done.is_set():
            await asyncio.sleep(0.05)
            ticks += 1

    ticker = asyncio.create_task(_ticker())
    step = ChooseIssueTrackerStep(project, tracker_provider, console=quiet_console, placement_detector=_slow_detector)

    assert await step.run(_model()) is True
    done.set()
    await ticker

    assert detected_in == [project.root]
    assert ticks >= 5


@pytest.mark.asyncio
async def test_choose_step_stops_on_unknown_credentials(
    monkeypatch: pytest.MonkeyPatch,
    project: Project,
    tracker_provider: IssueTrackerProvider,
    quiet_console: Console,
) -> None:
    answers = dict(_SLOW_PATH_ANSWERS, **{"Credentials identifier": "env:NOT_THERE"})
    asked: list[str] = []
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(answers, asked=asked))
    model = _model()
    step = ChooseIssueTrackerStep(project, tracker_provider, console=quiet_console, placement_detector=lambda root: None)

    assert await step.run(model) is False

    assert model.connection_details.issue_tracker is None
    assert len(asked) == 2
    assert 'Unable to find credentials with "env:NOT_THERE" identifier' in quiet_console.file.getvalue()


@pytest.mark.asyncio
async def test_choose_step_without_trackers(project: Project, quiet_console: Console) -> None:
    step = ChooseIssueTrackerStep(project, IssueTrackerProvider([], factories=[]), console=quiet_console)

    assert await step.run(_model()) is False
    assert "No issue trackers" in quiet_console.file.getvalue()


@pytest.mark.asyncio
async def test_create_step_updates_title(
    monkeypatch: pytest.MonkeyPatch, project: Project, quiet_console: Console
) -> None:
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary({"Issue title": "  Parser rewrite "}))
    model = _model()

    assert await CreateNewIssueStep(project, console=quiet_console).run(model) is True

    assert model.todo_item.title == "Parser rewrite"
    assert "See the code near this line" in quiet_console.file.getvalue()


@pytest.mark.asyncio
async def test_show_runs_steps_then_final_action_and_remembers(
    monkeypatch: pytest.MonkeyPatch,
    project: Project,
    tracker_provider: IssueTrackerProvider,
    store: UserChoiceStore,
    quiet_console: Console,
) -> None:
    answers = dict(_SLOW_PATH_ANSWERS, **{"Issue title": "Parser rewrite", "Create?": True})
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(answers))
    action = _RecordingAction()
    model = _model()
    wizard = (
        TodosaurusWizardBuilder(project, model, store=store, console=quiet_console)
        .set_title("Create New Issue")
        .add_step(ChooseIssueTrackerStep(project, tracker_provider, console=quiet_console, placement_detector=lambda root: None))
        .add_step(CreateNewIssueStep(project, console=quiet_console))
        .set_final_action(action)
        .build()
    )

    assert await wizard.show() is WizardResult.SUCCESS

    assert action.models == [model]
    assert store.get_choice_or_null() == UserChoice(
        issue_tracker_id="GitHub",
        credentials_id="gh-cli:github.com",
        placement_details=PlacementDetails(owner="owner", repository="repo", server_url="https://github.com"),
    )


@pytest.mark.asyncio
async def test_show_does_not_remember_failed_runs(
    monkeypatch: pytest.MonkeyPatch,
    project: Project,
    tracker_provider: IssueTrackerProvider,
    store: UserChoiceStore,
    quiet_console: Console,
) -> None:
    answers = dict(_SLOW_PATH_ANSWERS, **{"Create?": True})
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(answers))
    wizard = (
        TodosaurusWizardBuilder(project, _model(), store=store, console=quiet_console)
        .add_step(ChooseIssueTrackerStep(project, tracker_provider, console=quiet_console, placement_detector=lambda root: None))
        .set_final_action(_RecordingAction(WizardResult.FAILED))
        .build()
    )

    assert await wizard.show() is WizardResult.FAILED
    assert store.get_choice_or_null() is None


@pytest.mark.asyncio
async def test_show_cancelled_step_skips_final_action(
    monkeypatch: pytest.MonkeyPatch, project: Project, quiet_console: Console
) -> None:
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary({"Issue title": None}))
    action = _RecordingAction()
    wizard = (
        TodosaurusWizardBuilder(project, _model(), console=quiet_console)
        .add_step(CreateNewIssueStep(project, console=quiet_console))
        .set_final_action(action)
        .build()
    )

    assert await wizard.show() is WizardResult.FAILED
    assert action.models == []


@pytest.mark.asyncio
async def test_show_declined_confirmation_skips_final_action(
    monkeypatch: pytest.MonkeyPatch, project: Project, quiet_console: Console
) -> None:
    answers = {"Issue title": "Parser rewrite", "Open in Browser?": False}
    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary(answers))
    action = _RecordingAction()
    wizard = (
        TodosaurusWizardBuilder(project, _model(), console=quiet_console)
        .set_final_button_name("Open in Browser")
        .add_step(CreateNewIssueStep(project, console=quiet_console))
        .set_final_action(action)
        .build()
    )

    assert await wizard.show() is WizardResult.FAILED
    assert action.models == []


@pytest.mark.asyncio
async def test_show_survives_unwritable_store(
    monkeypatch: pytest.MonkeyPatch, project: Project, fake_tracker: FakeIssueTracker, quiet_console: Console
) -> None:
    class _BrokenStore(UserChoiceStore):
        def save_choice(self, choice: UserChoice) -> None:
            raise ConfigError("disk full")

    monkeypatch.setitem(sys.modules, "questionary", build_fake_questionary({"Issue title": "x", "Create?": True}))
    model = _model()
    model.connection_details = IssueTrackerConnectionDetails(
        issue_tracker=fake_tracker, credentials=Credentials(id="gh-cli:github.com", token="t")
    )
    model.remember_choice = True
    wizard = (
        TodosaurusWizardBuilder(project, model, store=_BrokenStore(project.root / "c.json"), console=quiet_console)
        .add_step(CreateNewIssueStep(project, console=quiet_console))
        .set_final_action(_RecordingAction())
        .build()
    )

    assert await wizard.show() is WizardResult.SUCCESS


def test_to_user_choice_with_empty_model() -> None:
    assert _model().to_user_choice() == UserChoice()
