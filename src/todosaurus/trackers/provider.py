"""Issue tracker registry and provider.

Trackers are discovered through :data:`TRACKER_FACTORIES`, a static mapping
from tracker identifier to factory class, matched against the repository
types the host knows about.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from todosaurus.contracts.config import TodosaurusConfig
from todosaurus.contracts.tracker import IssueTracker, IssueTrackerFactory, RepositoryType
from todosaurus.trackers.github.tracker import GitHubIssueTrackerFactory
from todosaurus.trackers.gitlab.tracker import GitLabIssueTrackerFactory

_LOG = logging.getLogger(__name__)

# Registry mapping tracker identifiers to their factories
TRACKER_FACTORIES: dict[str, type[IssueTrackerFactory]] = {
    GitHubIssueTrackerFactory.tracker_id: GitHubIssueTrackerFactory,
    GitLabIssueTrackerFactory.tracker_id: GitLabIssueTrackerFactory,
}


def register_factory(factory_cls: type[IssueTrackerFactory]) -> None:
    """Register a tracker factory under its ``tracker_id``."""
    TRACKER_FACTORIES[factory_cls.tracker_id] = factory_cls


class IssueTrackerProvider:
    def __init__(
        self,
        repository_types: Sequence[RepositoryType],
        factories: Iterable[IssueTrackerFactory] | None = None,
    ) -> None:
        self._repository_types = list(repository_types)
        if factories is None:
            factories = [factory_cls() for factory_cls in TRACKER_FACTORIES.values()]
        self._factories = list(factories)

    @classmethod
    def from_config(cls, config: TodosaurusConfig) -> IssueTrackerProvider:
        return cls([RepositoryType(name=name) for name in config.repository_types])

    def provide_all(self) -> list[IssueTracker]:
        trackers: list[IssueTracker] = []
        for repository_type in self._repository_types:
            tracker = self._create_tracker(repository_type)
            if tracker is not None:
                trackers.append(tracker)
        return trackers

    def provide_by_repository_name(self, repository_name: str) -> IssueTracker | None:
        for repository_type in self._repository_types:
            if repository_type.name == repository_name:
                return self._create_tracker(repository_type)
        return None

    def _create_tracker(self, repository_type: RepositoryType) -> IssueTracker | None:
        for factory in self._factories:
            if factory.tracker_id == repository_type.name:
                return factory.create_tracker(repository_type)
        _LOG.debug("No tracker factory for repository type %r", repository_type.name)
        return None
