"""Shared plumbing for REST-based tracker clients."""

from __future__ import annotations

import logging
from abc import abstractmethod
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from todosaurus.contracts.exceptions import TrackerError
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import Credentials, IssueTrackerClient, PlacementDetails
from todosaurus.items.todo_item import ISSUE_DESCRIPTION_PLACEHOLDER, SourceLocation, ToDoItem

_LOG = logging.getLogger(__name__)


class HttpIssueTrackerClient(IssueTrackerClient):
    tracker_title: str = "issue tracker"

    def __init__(
        self,
        *,
        project: Project,
        credentials: Credentials,
        placement_details: PlacementDetails,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._project = project
        self._credentials = credentials
        self._placement = placement_details
        self._transport = transport
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def api_url(self) -> str: ...  # pragma: no cover

    @abstractmethod
    def _headers(self) -> dict[str, str]: ...  # pragma: no cover

    @abstractmethod
    def _blob_url(self, relative_path: str, line: int) -> str: ...  # pragma: no cover

    async def __aenter__(self) -> HttpIssueTrackerClient:
        self._client = httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._headers(),
            transport=self._transport,
            timeout=self._timeout,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def repository_url(self) -> str:
        return f"{self._placement.server_url.rstrip('/')}/{self._placement.slug}"

    def code_url(self, location: SourceLocation) -> str:
        if location.path is None:
            return self.repository_url
        return self._blob_url(quote(self._project.relative_path(location.path)), location.line)

    def issue_body(self, item: ToDoItem, location: SourceLocation) -> str:
        return item.description.replace(ISSUE_DESCRIPTION_PLACEHOLDER, self.code_url(location))

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._client is None:
            raise TrackerError(f"{self.tracker_title} client is not open")
        _LOG.debug("%s %s%s", method, self.api_url, url)
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TrackerError(f"{self.tracker_title} request failed: {exc}") from exc

    def _raise_for_status(self, response: httpx.Response) -> None:
        if not response.is_error:
            return
        message = response.reason_phrase
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("message"):
            message = str(payload["message"])
        raise TrackerError(f"{self.tracker_title} API error {response.status_code}: {message}")

    def _json(self, response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise TrackerError(f"{self.tracker_title} returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise TrackerError(f"{self.tracker_title} returned an unexpected payload")
        return payload
