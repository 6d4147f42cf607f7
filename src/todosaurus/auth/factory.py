"""Credentials identifiers and the resolvers behind them.

A credentials identifier is ``<scheme>:<argument>``:

* ``env:GITHUB_TOKEN`` reads an environment variable,
* ``gh-cli:github.com`` asks the ``gh`` CLI for the host's token,
* ``glab-cli:gitlab.com`` asks the ``glab`` CLI for the host's token.
"""

from __future__ import annotations

from todosaurus.auth.base import TokenResolver
from todosaurus.auth.resolvers.cli import GhCliTokenResolver, GlabCliTokenResolver
from todosaurus.auth.resolvers.env import EnvTokenResolver
from todosaurus.contracts.exceptions import AuthenticationError

_RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "gh-cli": GhCliTokenResolver,
    "glab-cli": GlabCliTokenResolver,
}

SCHEMES = tuple(_RESOLVERS)


def parse_credentials_id(credentials_id: str) -> tuple[str, str]:
    scheme, separator, argument = credentials_id.strip().partition(":")
    if not separator or not argument.strip():
        raise AuthenticationError(f"Malformed credentials identifier: {credentials_id!r}")
    if scheme not in _RESOLVERS:
        available = ", ".join(SCHEMES)
        raise AuthenticationError(f"Unknown credentials scheme: {scheme!r}. Available: {available}")
    return scheme, argument.strip()


def create_token_resolver(credentials_id: str) -> TokenResolver:
    scheme, argument = parse_credentials_id(credentials_id)
    return _RESOLVERS[scheme](argument)
