"""Exception hierarchy for Todosaurus."""

from __future__ import annotations


class TodosaurusError(Exception):
    """Base exception for all Todosaurus errors."""


class ConfigError(TodosaurusError):
    """Configuration or choice-store loading failure."""


class DocumentError(TodosaurusError):
    """Text document misuse (bad range, edit outside a transaction)."""


class WizardStateError(TodosaurusError):
    """A wizard finished without filling in everything finalization needs."""


class UserChoiceError(TodosaurusError):
    """A remembered user choice can no longer be resolved."""


class MissingCredentialsIdError(UserChoiceError):
    def __init__(self) -> None:
        super().__init__("Credentials identifier must be specified")


class IssueTrackerNotFoundError(UserChoiceError):
    def __init__(self, issue_tracker_id: str | None) -> None:
        if issue_tracker_id:
            message = f'Unable to find issue tracker "{issue_tracker_id}"'
        else:
            message = "Unable to find issue tracker"
        super().__init__(message)
        self.issue_tracker_id = issue_tracker_id


class CredentialsNotFoundError(UserChoiceError):
    def __init__(self, credentials_id: str) -> None:
        super().__init__(f'Unable to find credentials with "{credentials_id}" identifier')
        self.credentials_id = credentials_id


class AuthenticationError(TodosaurusError):
    """Credentials could not be resolved by a resolver."""


class TrackerError(TodosaurusError):
    """Issue tracker API call failed."""


class IssueNotFoundError(TrackerError):
    """The tracker has no issue with the number referenced by a TODO item."""

    def __init__(self, *, tracker_title: str, issue_number: int) -> None:
        super().__init__(f'Issue with number "{issue_number}" not found on {tracker_title}')
        self.tracker_title = tracker_title
        self.issue_number = issue_number
