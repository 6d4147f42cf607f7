"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("todosaurus")
    except PackageNotFoundError:
        return "0.0.0"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive line number")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todosaurus")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--project-root", default=".", help="Project root (default: current directory)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser("scan", help="List TODO items")
    scan_parser.add_argument("paths", nargs="+", help="Files or directories to scan")
    scan_parser.add_argument("--new-only", action="store_true", help="Only list items not yet reported")

    report_parser = subparsers.add_parser("report", help="Create an issue for a TODO item")
    report_parser.add_argument("file", help="File containing the TODO item")
    report_parser.add_argument("--line", required=True, type=_positive_int, help="Line of the TODO item")

    open_parser = subparsers.add_parser("open", help="Open the issue a TODO item references")
    open_parser.add_argument("file", help="File containing the TODO item")
    open_parser.add_argument("--line", required=True, type=_positive_int, help="Line of the TODO item")

    subparsers.add_parser("forget", help="Forget the remembered tracker choice for the project")

    return parser


__all__ = ["build_parser"]
