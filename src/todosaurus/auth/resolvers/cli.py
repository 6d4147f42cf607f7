"""Token resolvers that ask a tracker's command-line client for its stored token."""

from __future__ import annotations

import asyncio
import logging
from abc import abstractmethod
from dataclasses import dataclass

from todosaurus.auth.base import TokenResolver
from todosaurus.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliTokenResolver(TokenResolver):
    """Runs ``command`` and takes the first line of its output as the token."""

    hostname: str

    program = ""

    @abstractmethod
    def command(self) -> tuple[str, ...]: ...  # pragma: no cover

    async def resolve(self) -> str:
        command = self.command()
        _LOG.debug("Asking %s for the %s token", self.program, self.hostname)
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise AuthenticationError(f"{self.program} is not available: {exc}") from exc

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            reason = stderr.decode(errors="replace").strip() or f"exit status {process.returncode}"
            raise AuthenticationError(f"{self.program} has no token for {self.hostname}: {reason}")

        lines = stdout.decode(errors="replace").strip().splitlines()
        if not lines or not lines[0].strip():
            raise AuthenticationError(f"{self.program} printed no token for {self.hostname}")
        return lines[0].strip()


@dataclass(frozen=True)
class GhCliTokenResolver(CliTokenResolver):
    hostname: str = "github.com"

    program = "gh"

    def command(self) -> tuple[str, ...]:
        return ("gh", "auth", "token", "--hostname", self.hostname)


@dataclass(frozen=True)
class GlabCliTokenResolver(CliTokenResolver):
    hostname: str = "gitlab.com"

    program = "glab"

    def command(self) -> tuple[str, ...]:
        return ("glab", "config", "get", "token", "--host", self.hostname)
