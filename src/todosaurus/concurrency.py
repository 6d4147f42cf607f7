"""Execution contexts for document access.

Network calls run on the event loop. Every document read and write goes
through a :class:`DocumentDispatcher`, which funnels them onto one worker
thread so edits to the same text never interleave.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from types import TracebackType
from typing import TypeVar

from todosaurus.contracts.document import TextDocument

T = TypeVar("T")


class DocumentDispatcher:
    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="todosaurus-document")

    async def read_action(self, action: Callable[[], T]) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, action)

    async def write_action(self, document: TextDocument, name: str, action: Callable[[], T]) -> T:
        """Run *action* inside one named transaction on *document*."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, functools.partial(_in_transaction, document, name, action))

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> DocumentDispatcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.shutdown()


def _in_transaction(document: TextDocument, name: str, action: Callable[[], T]) -> T:
    with document.transaction(name):
        return action()
