"""GitHub REST client."""

from __future__ import annotations

from pydantic import ValidationError

from todosaurus.contracts.exceptions import TrackerError
from todosaurus.contracts.tracker import Issue
from todosaurus.items.todo_item import SourceLocation, ToDoItem
from todosaurus.trackers.http import HttpIssueTrackerClient

GITHUB_SERVER_URL = "https://github.com"


class GitHubIssueTrackerClient(HttpIssueTrackerClient):
    tracker_title = "GitHub"

    @property
    def api_url(self) -> str:
        server = self._placement.server_url.rstrip("/")
        if server == GITHUB_SERVER_URL:
            return "https://api.github.com"
        return f"{server}/api/v3"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._credentials.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "todosaurus",
        }

    def _blob_url(self, relative_path: str, line: int) -> str:
        return f"{self.repository_url}/blob/{self._placement.ref}/{relative_path}#L{line}"

    async def create_issue(self, item: ToDoItem, location: SourceLocation) -> Issue:
        response = await self._request(
            "POST",
            f"/repos/{self._placement.slug}/issues",
            json={"title": item.title, "body": self.issue_body(item, location)},
        )
        self._raise_for_status(response)
        return _to_issue(self._json(response))

    async def get_issue(self, item: ToDoItem, issue_number: int) -> Issue | None:
        response = await self._request("GET", f"/repos/{self._placement.slug}/issues/{issue_number}")
        # 410 Gone is what GitHub answers for deleted issues.
        if response.status_code in {404, 410}:
            return None
        self._raise_for_status(response)
        return _to_issue(self._json(response))


def _to_issue(payload: dict[str, object]) -> Issue:
    try:
        return Issue.model_validate(
            {"number": payload.get("number"), "url": payload.get("html_url"), "title": payload.get("title") or ""}
        )
    except ValidationError as exc:
        raise TrackerError(f"GitHub returned a malformed issue: {exc}") from exc
