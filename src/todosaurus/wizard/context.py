"""State carried through one wizard run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from todosaurus.contracts.tracker import Credentials, IssueTracker, PlacementDetails
from todosaurus.items.todo_item import ToDoItem
from todosaurus.memoization.store import UserChoice


class WizardResult(Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class IssueTrackerConnectionDetails:
    issue_tracker: IssueTracker | None = None
    credentials: Credentials | None = None


@dataclass
class TodosaurusWizardContext:
    todo_item: ToDoItem
    connection_details: IssueTrackerConnectionDetails = field(default_factory=IssueTrackerConnectionDetails)
    placement_details: PlacementDetails | None = None
    remember_choice: bool = False

    def to_user_choice(self) -> UserChoice:
        tracker = self.connection_details.issue_tracker
        credentials = self.connection_details.credentials
        return UserChoice(
            issue_tracker_id=tracker.id if tracker is not None else None,
            credentials_id=credentials.id if credentials is not None else None,
            placement_details=self.placement_details,
        )
