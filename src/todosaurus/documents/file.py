"""File-backed text document."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from todosaurus.contracts.exceptions import DocumentError
from todosaurus.documents.memory import InMemoryDocument

_LOG = logging.getLogger(__name__)


class FileDocument(InMemoryDocument):
    """Document over a file on disk; every committed transaction is written back whole."""

    def __init__(self, text: str, *, path: Path, encoding: str = "utf-8") -> None:
        super().__init__(text, path=path)
        self._encoding = encoding

    @classmethod
    def load(cls, path: str | Path, *, encoding: str = "utf-8") -> FileDocument:
        file_path = Path(path).expanduser().resolve()
        try:
            # newline="" keeps CRLF files byte-identical on write-back.
            with file_path.open(encoding=encoding, newline="") as handle:
                text = handle.read()
        except OSError as exc:
            raise DocumentError(f"failed reading file: {file_path}") from exc
        except UnicodeDecodeError as exc:
            raise DocumentError(f"file is not valid {encoding}: {file_path}") from exc
        return cls(text, path=file_path, encoding=encoding)

    def _on_commit(self) -> None:
        path = self.path
        assert path is not None
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding=self._encoding, newline="") as handle:
                handle.write(self.text)
            os.chmod(temp_name, path.stat().st_mode & 0o7777)
            os.replace(temp_name, path)
        except OSError as exc:
            Path(temp_name).unlink(missing_ok=True)
            raise DocumentError(f"failed writing file: {path}") from exc
        _LOG.debug("Wrote %s", path)
