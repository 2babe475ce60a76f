"""Git helper functions used by the update check."""

from __future__ import annotations

from pathlib import Path

from . import exec as exec_util
from .models import ManifestChange

MANIFEST_PATHSPEC = "package*.json"
MANIFEST_STATUS = ("git", "status", "-s", MANIFEST_PATHSPEC)


def manifest_status(
    working_dir: Path,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Return ``git status -s`` output for manifests in ``working_dir``.

    Args:
        working_dir: Directory holding ``package.json``.
        runner: Optional command runner override.

    Returns:
        Raw short-format status text; empty when no manifest changed.

    Raises:
        DependencyMissingError: git is not installed.
        ExternalCommandFailedError: git exited non-zero.
    """
    result = exec_util.run_checked(
        exec_util.CommandRequest(
            argv=MANIFEST_STATUS,
            cwd=working_dir,
        ),
        runner=runner,
    )
    return result.stdout


def parse_short_status(text: str) -> list[ManifestChange]:
    """Parse ``git status --short`` lines into manifest changes.

    Example:
        >>> parse_short_status(" M package.json\\nM  package-lock.json\\n")
        [ManifestChange(status=' M', path='package.json'), ManifestChange(status='M ', path='package-lock.json')]
    """
    changes: list[ManifestChange] = []
    for line in text.splitlines():
        if len(line) < 4:
            continue
        changes.append(ManifestChange(status=line[:2], path=line[3:]))
    return changes
