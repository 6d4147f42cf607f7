"""Issue tracker capability contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import TracebackType
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, PositiveInt

from todosaurus.contracts.project import Project

if TYPE_CHECKING:
    from todosaurus.items.todo_item import SourceLocation, ToDoItem


class Issue(BaseModel):
    number: PositiveInt
    url: str
    title: str = ""


class Credentials(BaseModel):
    id: str
    token: str = Field(repr=False)


class PlacementDetails(BaseModel):
    """Where a new issue goes: a repository on a tracker server."""

    owner: str
    repository: str
    server_url: str
    ref: str = "HEAD"

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repository}"


@dataclass(frozen=True)
class RepositoryType:
    name: str
    title: str = ""


class IssueTrackerClient(ABC):
    """Client bound to one tracker, one set of credentials and one placement.

    Use as an async context manager so the HTTP session is closed::

        async with tracker.create_client(project, credentials, placement) as client:
            issue = await client.create_issue(item, location)
    """

    @abstractmethod
    async def __aenter__(self) -> IssueTrackerClient: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def create_issue(self, item: ToDoItem, location: SourceLocation) -> Issue:
        """Create an issue from *item*; *location* is where the item sits in its document."""

    @abstractmethod
    async def get_issue(self, item: ToDoItem, issue_number: int) -> Issue | None:
        """Fetch issue *issue_number*, or ``None`` if the tracker has none."""


class CredentialsProvider(ABC):
    @abstractmethod
    async def provide(self, credentials_id: str) -> Credentials | None: ...  # pragma: no cover


class IssueTracker(ABC):
    @property
    @abstractmethod
    def id(self) -> str: ...  # pragma: no cover

    @property
    @abstractmethod
    def title(self) -> str: ...  # pragma: no cover

    @property
    @abstractmethod
    def icon(self) -> str: ...  # pragma: no cover

    @property
    @abstractmethod
    def default_server_url(self) -> str: ...  # pragma: no cover

    @property
    @abstractmethod
    def default_credentials_id(self) -> str: ...  # pragma: no cover

    @abstractmethod
    def create_client(
        self, project: Project, credentials: Credentials, placement_details: PlacementDetails
    ) -> IssueTrackerClient: ...  # pragma: no cover

    @abstractmethod
    def create_credentials_provider(self) -> CredentialsProvider: ...  # pragma: no cover

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class IssueTrackerFactory(ABC):
    tracker_id: str

    @abstractmethod
    def create_tracker(self, repository_type: RepositoryType) -> IssueTracker: ...  # pragma: no cover
