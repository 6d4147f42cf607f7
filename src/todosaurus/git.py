"""Git remote detection."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

from todosaurus.contracts.tracker import PlacementDetails

# Patterns for parsing git remote URLs.
_SSH_RE = re.compile(r"^(?:ssh://)?git@(?P<host>[^:/]+)[:/](?P<owner>.+)/(?P<repo>[^/]+?)(?:\.git)?/?$")
_HTTPS_RE = re.compile(r"^(?P<scheme>https?)://(?:[^@/]+@)?(?P<host>[^/]+)/(?P<owner>.+)/(?P<repo>[^/]+?)(?:\.git)?/?$")


def parse_remote_url(url: str) -> PlacementDetails | None:
    match = _SSH_RE.match(url)
    if match:
        return PlacementDetails(
            owner=match.group("owner"),
            repository=match.group("repo"),
            server_url=f"https://{match.group('host')}",
        )
    match = _HTTPS_RE.match(url)
    if match:
        return PlacementDetails(
            owner=match.group("owner"),
            repository=match.group("repo"),
            server_url=f"{match.group('scheme')}://{match.group('host')}",
        )
    return None


def detect_placement(root: Path) -> PlacementDetails | None:
    """Best-effort placement from the ``origin`` remote of the repository at *root*.

    Returns ``None`` when not inside a git repository, when ``git`` is not
    installed, or when the remote URL cannot be parsed.
    """
    try:
        result = subprocess.run(
            ["git", "-C", str(root), "remote", "get-url", "origin"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if result.returncode != 0:
        return None
    return parse_remote_url(result.stdout.strip())
