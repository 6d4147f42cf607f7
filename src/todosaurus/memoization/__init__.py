"""User choice memoization."""

from todosaurus.memoization.store import UserChoice, UserChoiceStore

__all__ = ["UserChoice", "UserChoiceStore"]
