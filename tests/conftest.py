"""Shared test fixtures for todosaurus tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from tests.fakes.tracker import FakeIssueTracker, FakeIssueTrackerFactory, RecordingNotifier
from todosaurus.concurrency import DocumentDispatcher
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import PlacementDetails, RepositoryType
from todosaurus.memoization.store import UserChoiceStore
from todosaurus.trackers.provider import IssueTrackerProvider


@pytest.fixture
def project(tmp_path: Path) -> Project:
    return Project(root=tmp_path)


@pytest.fixture
def placement() -> PlacementDetails:
    return PlacementDetails(owner="owner", repository="repo", server_url="https://github.com")


@pytest.fixture
def fake_tracker() -> FakeIssueTracker:
    return FakeIssueTracker("GitHub", tokens={"gh-cli:github.com": "tok_123"})


@pytest.fixture
def tracker_provider(fake_tracker: FakeIssueTracker) -> IssueTrackerProvider:
    return IssueTrackerProvider(
        [RepositoryType("GitHub"), RepositoryType("GitLab")],
        factories=[FakeIssueTrackerFactory(fake_tracker)],
    )


@pytest.fixture
def store(project: Project) -> UserChoiceStore:
    return UserChoiceStore(project.root / ".todosaurus" / "user-choice.json")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def dispatcher():
    with DocumentDispatcher() as value:
        yield value


@pytest.fixture
def quiet_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False)
