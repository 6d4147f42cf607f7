"""Issue trackers."""

from todosaurus.trackers.provider import TRACKER_FACTORIES, IssueTrackerProvider, register_factory

__all__ = ["TRACKER_FACTORIES", "IssueTrackerProvider", "register_factory"]
