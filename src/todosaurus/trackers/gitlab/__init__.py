"""GitLab tracker."""

from todosaurus.trackers.gitlab.client import GitLabIssueTrackerClient
from todosaurus.trackers.gitlab.tracker import GitLabIssueTracker, GitLabIssueTrackerFactory

__all__ = ["GitLabIssueTracker", "GitLabIssueTrackerClient", "GitLabIssueTrackerFactory"]
