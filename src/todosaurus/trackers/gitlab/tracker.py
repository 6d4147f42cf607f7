"""GitLab issue tracker."""

from __future__ import annotations

import httpx

from todosaurus.auth.provider import ResolverCredentialsProvider
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import (
    Credentials,
    CredentialsProvider,
    IssueTracker,
    IssueTrackerFactory,
    PlacementDetails,
    RepositoryType,
)
from todosaurus.trackers.gitlab.client import GITLAB_SERVER_URL, GitLabIssueTrackerClient


class GitLabIssueTracker(IssueTracker):
    def __init__(
        self,
        repository_type: RepositoryType,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._repository_type = repository_type
        self._transport = transport

    @property
    def id(self) -> str:
        return self._repository_type.name

    @property
    def title(self) -> str:
        return self._repository_type.title or "GitLab"

    @property
    def icon(self) -> str:
        return "🦊"

    @property
    def default_server_url(self) -> str:
        return GITLAB_SERVER_URL

    @property
    def default_credentials_id(self) -> str:
        return "env:GITLAB_TOKEN"

    def create_client(
        self, project: Project, credentials: Credentials, placement_details: PlacementDetails
    ) -> GitLabIssueTrackerClient:
        return GitLabIssueTrackerClient(
            project=project,
            credentials=credentials,
            placement_details=placement_details,
            transport=self._transport,
        )

    def create_credentials_provider(self) -> CredentialsProvider:
        return ResolverCredentialsProvider()


class GitLabIssueTrackerFactory(IssueTrackerFactory):
    tracker_id = "GitLab"

    def create_tracker(self, repository_type: RepositoryType) -> IssueTracker:
        return GitLabIssueTracker(repository_type)
