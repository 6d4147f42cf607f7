"""Text document implementations."""

from todosaurus.documents.file import FileDocument
from todosaurus.documents.memory import InMemoryDocument

__all__ = ["FileDocument", "InMemoryDocument"]
