"""Command-line interface for Todosaurus."""

from __future__ import annotations

from todosaurus.cli.app import main as main
from todosaurus.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
