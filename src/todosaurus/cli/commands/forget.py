"""Forget command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from todosaurus.config import load_project_config
from todosaurus.contracts.project import Project
from todosaurus.memoization.store import UserChoiceStore


def run_forget(args: argparse.Namespace) -> int:
    project = Project(Path(args.project_root).resolve())
    store = UserChoiceStore.for_project(project, load_project_config(project.root))
    if store.clear_choice():
        print(f"Forgot the remembered choice ({store.path})")
    else:
        print("No remembered choice.")
    return 0


__all__ = ["run_forget"]
