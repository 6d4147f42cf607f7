"""Remembered wizard choices, one JSON file per project."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from todosaurus.contracts.config import TodosaurusConfig
from todosaurus.contracts.exceptions import ConfigError
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import PlacementDetails

_LOG = logging.getLogger(__name__)


class UserChoice(BaseModel):
    issue_tracker_id: str | None = None
    credentials_id: str | None = None
    placement_details: PlacementDetails | None = None


class UserChoiceStore:
    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()

    @classmethod
    def for_project(cls, project: Project, config: TodosaurusConfig) -> UserChoiceStore:
        path = config.choice_path
        if not path.is_absolute():
            path = project.root / path
        return cls(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_choice_or_null(self) -> UserChoice | None:
        with self._lock:
            if not self._path.exists():
                return None
            try:
                payload: Any = json.loads(self._path.read_text(encoding="utf-8"))
                return UserChoice.model_validate(payload)
            except (OSError, json.JSONDecodeError, ValidationError) as exc:
                raise ConfigError(f"invalid user choice file: {self._path}") from exc

    def save_choice(self, choice: UserChoice) -> None:
        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.write_text(choice.model_dump_json(indent=2), encoding="utf-8")
            except OSError as exc:
                raise ConfigError(f"failed to persist user choice: {self._path}") from exc
            _LOG.debug("Saved user choice to %s", self._path)

    def clear_choice(self) -> bool:
        """Forget the stored choice; return whether there was one."""
        with self._lock:
            try:
                self._path.unlink()
            except FileNotFoundError:
                return False
            except OSError as exc:
                raise ConfigError(f"failed to remove user choice: {self._path}") from exc
            return True
