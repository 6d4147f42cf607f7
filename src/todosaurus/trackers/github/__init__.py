"""GitHub tracker."""

from todosaurus.trackers.github.client import GitHubIssueTrackerClient
from todosaurus.trackers.github.tracker import GitHubIssueTracker, GitHubIssueTrackerFactory

__all__ = ["GitHubIssueTracker", "GitHubIssueTrackerClient", "GitHubIssueTrackerFactory"]
