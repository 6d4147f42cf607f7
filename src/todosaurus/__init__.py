"""Public API surface for Todosaurus."""

__version__ = "0.1.0"

from todosaurus.concurrency import DocumentDispatcher
from todosaurus.config import load_config, load_project_config
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
from todosaurus.documents import FileDocument, InMemoryDocument
from todosaurus.items import ToDoItem, find_item_at_line, find_todo_items
from todosaurus.memoization import UserChoice, UserChoiceStore
from todosaurus.service import ToDoService
from todosaurus.trackers import IssueTrackerProvider, register_factory
from todosaurus.wizard import IssueTrackerConnectionDetails, TodosaurusWizardContext, WizardResult

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "Credentials",
    "CredentialsNotFoundError",
    "CredentialsProvider",
    "DocumentDispatcher",
    "DocumentError",
    "FileDocument",
    "InMemoryDocument",
    "Issue",
    "IssueNotFoundError",
    "IssueTracker",
    "IssueTrackerClient",
    "IssueTrackerConnectionDetails",
    "IssueTrackerFactory",
    "IssueTrackerNotFoundError",
    "IssueTrackerProvider",
    "LoggingNotifier",
    "MissingCredentialsIdError",
    "Notifier",
    "NullNotifier",
    "PlacementDetails",
    "Project",
    "RangeMarker",
    "RepositoryType",
    "TextDocument",
    "ToDoItem",
    "ToDoService",
    "TodosaurusConfig",
    "TodosaurusError",
    "TodosaurusWizardContext",
    "TrackerError",
    "UserChoice",
    "UserChoiceError",
    "UserChoiceStore",
    "WizardResult",
    "find_item_at_line",
    "find_todo_items",
    "load_config",
    "load_project_config",
    "register_factory",
]
