from __future__ import annotations

import pytest

from todosaurus.auth.factory import SCHEMES, create_token_resolver, parse_credentials_id
from todosaurus.auth.provider import ResolverCredentialsProvider
from todosaurus.auth.resolvers.cli import GhCliTokenResolver, GlabCliTokenResolver
from todosaurus.auth.resolvers.env import EnvTokenResolver
from todosaurus.contracts.exceptions import AuthenticationError
from todosaurus.contracts.tracker import RepositoryType
from todosaurus.trackers.provider import TRACKER_FACTORIES


@pytest.mark.parametrize(
    ("credentials_id", "expected"),
    [
        ("env:GITHUB_TOKEN", ("env", "GITHUB_TOKEN")),
        ("gh-cli:github.com", ("gh-cli", "github.com")),
        (" glab-cli: gitlab.example.com ", ("glab-cli", "gitlab.example.com")),
    ],
)
def test_parse_credentials_id(credentials_id: str, expected: tuple[str, str]) -> None:
    assert parse_credentials_id(credentials_id) == expected


@pytest.mark.parametrize("credentials_id", ["", "env", "env:", "env:   "])
def test_parse_credentials_id_rejects_malformed(credentials_id: str) -> None:
    with pytest.raises(AuthenticationError, match="Malformed"):
        parse_credentials_id(credentials_id)


@pytest.mark.parametrize("credentials_id", ["vault:secret/github", "token:ci"])
def test_parse_credentials_id_rejects_unknown_scheme(credentials_id: str) -> None:
    with pytest.raises(AuthenticationError, match="Unknown credentials scheme"):
        parse_credentials_id(credentials_id)


def test_create_token_resolver_per_scheme() -> None:
    assert SCHEMES == ("env", "gh-cli", "glab-cli")
    assert create_token_resolver("env:GITHUB_TOKEN") == EnvTokenResolver(variable="GITHUB_TOKEN")
    assert create_token_resolver("gh-cli:github.com") == GhCliTokenResolver(hostname="github.com")
    assert create_token_resolver("glab-cli:gitlab.com") == GlabCliTokenResolver(hostname="gitlab.com")


@pytest.mark.asyncio
async def test_provider_returns_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "tok_123")

    credentials = await ResolverCredentialsProvider().provide("env:GITHUB_TOKEN")

    assert credentials is not None
    assert credentials.id == "env:GITHUB_TOKEN"
    assert credentials.token == "tok_123"
    assert "tok_123" not in repr(credentials)


@pytest.mark.asyncio
@pytest.mark.parametrize("credentials_id", ["env:MISSING_TOKEN_FOR_TESTS", "vault:x", "token:unknown", "nonsense"])
async def test_provider_returns_none_when_unresolvable(
    monkeypatch: pytest.MonkeyPatch, credentials_id: str
) -> None:
    monkeypatch.delenv("MISSING_TOKEN_FOR_TESTS", raising=False)

    assert await ResolverCredentialsProvider().provide(credentials_id) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("tracker_id", ["GitHub", "GitLab"])
async def test_registered_trackers_resolve_every_advertised_scheme(
    monkeypatch: pytest.MonkeyPatch, tracker_id: str
) -> None:
    class _Process:
        returncode = 0

        async def communicate(self) -> tuple[bytes, bytes]:
            return b"cli-token\n", b""

    async def _mock_create_subprocess_exec(*args: object, **kwargs: object) -> _Process:
        return _Process()

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)
    monkeypatch.setenv("TODOSAURUS_TEST_TOKEN", "env-token")
    tracker = TRACKER_FACTORIES[tracker_id]().create_tracker(RepositoryType(tracker_id))
    provider = tracker.create_credentials_provider()
    ids = {"env": "env:TODOSAURUS_TEST_TOKEN", "gh-cli": "gh-cli:github.com", "glab-cli": "glab-cli:gitlab.com"}

    resolved = {scheme: await provider.provide(ids[scheme]) for scheme in SCHEMES}

    assert {scheme: credentials.token for scheme, credentials in resolved.items()} == {
        "env": "env-token",
        "gh-cli": "cli-token",
        "glab-cli": "cli-token",
    }
