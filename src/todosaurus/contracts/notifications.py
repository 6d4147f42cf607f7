"""User notification contract."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from todosaurus.contracts.tracker import Issue

_LOG = logging.getLogger(__name__)


class Notifier(ABC):
    """Receives the terminal outcome of every user-facing operation."""

    @abstractmethod
    def create_new_issue_succeeded(self, issue: Issue) -> None: ...  # pragma: no cover

    @abstractmethod
    def create_new_issue_failed(self, error: BaseException) -> None: ...  # pragma: no cover

    @abstractmethod
    def open_reported_issue_failed(self, error: BaseException) -> None: ...  # pragma: no cover


class NullNotifier(Notifier):
    def create_new_issue_succeeded(self, issue: Issue) -> None:
        pass

    def create_new_issue_failed(self, error: BaseException) -> None:
        pass

    def open_reported_issue_failed(self, error: BaseException) -> None:
        pass


class LoggingNotifier(Notifier):
    def create_new_issue_succeeded(self, issue: Issue) -> None:
        _LOG.info("Issue #%d created: %s", issue.number, issue.url)

    def create_new_issue_failed(self, error: BaseException) -> None:
        _LOG.error("Unable to create issue: %s", error)

    def open_reported_issue_failed(self, error: BaseException) -> None:
        _LOG.error("Unable to open reported issue: %s", error)
