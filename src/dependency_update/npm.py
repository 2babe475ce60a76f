"""npm invocations used by the update check."""

from __future__ import annotations

from pathlib import Path

from . import exec as exec_util
from . import log

NPM_UPDATE = ("npm", "update")


def update(working_dir: Path, *, runner: exec_util.CommandRunner | None = None) -> None:
    """Run ``npm update`` in ``working_dir``, rewriting manifests in place.

    Output is captured and relayed through the logger so registered secrets
    are masked.

    Raises:
        DependencyMissingError: npm is not installed.
        ExternalCommandFailedError: npm exited non-zero.
    """
    result = exec_util.run_checked(
        exec_util.CommandRequest(argv=NPM_UPDATE, cwd=working_dir), runner=runner
    )
    for line in result.stdout.splitlines():
        log.info(line)
    for line in result.stderr.splitlines():
        log.debug(line)
