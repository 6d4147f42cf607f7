from __future__ import annotations

import json
from pathlib import Path

import pytest

from todosaurus.contracts.config import TodosaurusConfig
from todosaurus.contracts.exceptions import ConfigError
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import PlacementDetails
from todosaurus.memoization.store import UserChoice, UserChoiceStore


def test_missing_file_means_no_choice(tmp_path: Path) -> None:
    store = UserChoiceStore(tmp_path / "choice.json")

    assert store.get_choice_or_null() is None


def test_save_then_load_keeps_all_fields(tmp_path: Path, placement: PlacementDetails) -> None:
    store = UserChoiceStore(tmp_path / "nested" / "choice.json")
    choice = UserChoice(issue_tracker_id="GitHub", credentials_id="gh-cli:github.com", placement_details=placement)

    store.save_choice(choice)

    assert store.path.exists()
    assert store.get_choice_or_null() == choice


def test_partial_choice_is_loaded_as_is(tmp_path: Path) -> None:
    path = tmp_path / "choice.json"
    path.write_text(json.dumps({"issue_tracker_id": "GitHub"}), encoding="utf-8")

    choice = UserChoiceStore(path).get_choice_or_null()

    assert choice == UserChoice(issue_tracker_id="GitHub")
    assert choice.credentials_id is None


@pytest.mark.parametrize("content", ["{not json", json.dumps({"placement_details": {"owner": "o"}}), "[]"])
def test_corrupt_file_raises_config_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "choice.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid user choice file"):
        UserChoiceStore(path).get_choice_or_null()


def test_clear_choice_reports_whether_something_was_removed(tmp_path: Path) -> None:
    store = UserChoiceStore(tmp_path / "choice.json")
    store.save_choice(UserChoice(issue_tracker_id="GitLab"))

    assert store.clear_choice() is True
    assert store.get_choice_or_null() is None
    assert store.clear_choice() is False


def test_for_project_resolves_relative_path_against_root(tmp_path: Path) -> None:
    project = Project(root=tmp_path)

    store = UserChoiceStore.for_project(project, TodosaurusConfig())

    assert store.path == tmp_path / ".todosaurus" / "user-choice.json"


def test_for_project_keeps_absolute_path(tmp_path: Path) -> None:
    absolute = tmp_path / "elsewhere" / "choice.json"

    store = UserChoiceStore.for_project(Project(root=tmp_path / "repo"), TodosaurusConfig(choice_path=absolute))

    assert store.path == absolute
