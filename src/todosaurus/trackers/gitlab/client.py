"""GitLab REST client."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import ValidationError

from todosaurus.contracts.exceptions import TrackerError
from todosaurus.contracts.tracker import Issue
from todosaurus.items.todo_item import SourceLocation, ToDoItem
from todosaurus.trackers.http import HttpIssueTrackerClient

GITLAB_SERVER_URL = "https://gitlab.com"


class GitLabIssueTrackerClient(HttpIssueTrackerClient):
    tracker_title = "GitLab"

    @property
    def api_url(self) -> str:
        return f"{self._placement.server_url.rstrip('/')}/api/v4"

    @property
    def _project_path(self) -> str:
        return f"/projects/{quote(self._placement.slug, safe='')}"

    def _headers(self) -> dict[str, str]:
        return {"PRIVATE-TOKEN": self._credentials.token, "User-Agent": "todosaurus"}

    def _blob_url(self, relative_path: str, line: int) -> str:
        return f"{self.repository_url}/-/blob/{self._placement.ref}/{relative_path}#L{line}"

    async def create_issue(self, item: ToDoItem, location: SourceLocation) -> Issue:
        response = await self._request(
            "POST",
            f"{self._project_path}/issues",
            json={"title": item.title, "description": self.issue_body(item, location)},
        )
        self._raise_for_status(response)
        return _to_issue(self._json(response))

    async def get_issue(self, item: ToDoItem, issue_number: int) -> Issue | None:
        response = await self._request("GET", f"{self._project_path}/issues/{issue_number}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        return _to_issue(self._json(response))


def _to_issue(payload: dict[str, object]) -> Issue:
    # GitLab numbers issues per project with "iid"; "id" is instance-wide.
    try:
        return Issue.model_validate(
            {"number": payload.get("iid"), "url": payload.get("web_url"), "title": payload.get("title") or ""}
        )
    except ValidationError as exc:
        raise TrackerError(f"GitLab returned a malformed issue: {exc}") from exc
