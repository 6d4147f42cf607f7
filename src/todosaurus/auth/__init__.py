"""Credentials resolution."""

from todosaurus.auth.base import TokenResolver
from todosaurus.auth.factory import create_token_resolver, parse_credentials_id
from todosaurus.auth.provider import ResolverCredentialsProvider

__all__ = ["ResolverCredentialsProvider", "TokenResolver", "create_token_resolver", "parse_credentials_id"]
