"""Credentials provider backed by token resolvers."""

from __future__ import annotations

import logging

from todosaurus.auth.factory import create_token_resolver
from todosaurus.contracts.exceptions import AuthenticationError
from todosaurus.contracts.tracker import Credentials, CredentialsProvider

_LOG = logging.getLogger(__name__)


class ResolverCredentialsProvider(CredentialsProvider):
    """Resolves ``<scheme>:<argument>`` identifiers; unresolvable ones yield ``None``."""

    async def provide(self, credentials_id: str) -> Credentials | None:
        try:
            token = await create_token_resolver(credentials_id).resolve()
        except AuthenticationError as exc:
            _LOG.debug("Credentials %r unavailable: %s", credentials_id, exc)
            return None
        return Credentials(id=credentials_id, token=token)
