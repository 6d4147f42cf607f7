"""Module entrypoint for ``python -m todosaurus``."""

from todosaurus.cli import main

raise SystemExit(main())
