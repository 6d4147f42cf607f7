"""Config loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from todosaurus.contracts.config import TodosaurusConfig
from todosaurus.contracts.exceptions import ConfigError

PROJECT_CONFIG_NAME = ".todosaurus.json"


def load_config(path: str | Path) -> TodosaurusConfig:
    """Load and validate config from JSON."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return TodosaurusConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def load_project_config(root: Path) -> TodosaurusConfig:
    """Load ``.todosaurus.json`` from the project root, or defaults when it is absent."""
    path = root / PROJECT_CONFIG_NAME
    if not path.exists():
        return TodosaurusConfig()
    return load_config(path)
