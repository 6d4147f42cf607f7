"""Contracts-domain exports."""

from todosaurus.contracts.config import TodosaurusConfig
from todosaurus.contracts.document import RangeMarker, TextDocument
from todosaurus.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    CredentialsNotFoundError,
    DocumentError,
    IssueNotFoundError,
    IssueTrackerNotFoundError,
    MissingCredentialsIdError,
    TodosaurusError,
    TrackerError,
    UserChoiceError,
    WizardStateError,
)
from todosaurus.contracts.notifications import LoggingNotifier, Notifier, NullNotifier
from todosaurus.contracts.project import Project
from todosaurus.contracts.tracker import (
    Credentials,
    CredentialsProvider,
    Issue,
    IssueTracker,
    IssueTrackerClient,
    IssueTrackerFactory,
    PlacementDetails,
    RepositoryType,
)

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "Credentials",
    "CredentialsNotFoundError",
    "CredentialsProvider",
    "DocumentError",
    "Issue",
    "IssueNotFoundError",
    "IssueTracker",
    "IssueTrackerClient",
    "IssueTrackerFactory",
    "IssueTrackerNotFoundError",
    "LoggingNotifier",
    "MissingCredentialsIdError",
    "Notifier",
    "NullNotifier",
    "PlacementDetails",
    "Project",
    "RangeMarker",
    "RepositoryType",
    "TextDocument",
    "TodosaurusConfig",
    "TodosaurusError",
    "TrackerError",
    "UserChoiceError",
    "WizardStateError",
]
