"""Typed ports for the external tools the update check drives."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from . import exec as exec_util
from . import git, npm


class DependencyTools(Protocol):
    """Package-manager and version-control operations used by the update check."""

    def update_dependencies(self, working_dir: Path) -> None: ...

    def modified_manifests(self, working_dir: Path) -> str: ...


class CliDependencyTools:
    """Default adapter backed by the ``npm`` and ``git`` executables."""

    def __init__(self, runner: exec_util.CommandRunner | None = None) -> None:
        self._runner = runner

    def update_dependencies(self, working_dir: Path) -> None:
        npm.update(working_dir, runner=self._runner)

    def modified_manifests(self, working_dir: Path) -> str:
        return git.manifest_status(working_dir, runner=self._runner)
