"""Concrete token resolvers."""

from todosaurus.auth.resolvers.cli import CliTokenResolver, GhCliTokenResolver, GlabCliTokenResolver
from todosaurus.auth.resolvers.env import EnvTokenResolver

__all__ = ["CliTokenResolver", "EnvTokenResolver", "GhCliTokenResolver", "GlabCliTokenResolver"]
