"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from todosaurus.cli.commands.forget import run_forget
from todosaurus.cli.commands.items import run_open, run_report
from todosaurus.cli.commands.scan import run_scan
from todosaurus.cli.parser import build_parser
from todosaurus.contracts.exceptions import ConfigError, DocumentError

_COMMANDS = {
    "scan": run_scan,
    "report": run_report,
    "open": run_open,
    "forget": run_forget,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return _COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except DocumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
