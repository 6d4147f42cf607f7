"""Config contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TodosaurusConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    repository_types: list[str] = Field(default_factory=lambda: ["GitHub", "GitLab"])
    choice_path: Path = Path(".todosaurus/user-choice.json")
    encoding: str = "utf-8"

    @field_validator("repository_types")
    @classmethod
    def _no_duplicate_types(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("repository_types must not contain duplicates")
        return value
