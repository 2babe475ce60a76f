"""Data models for a dependency-update run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator


class UpdateCheckConfig(BaseModel):
    """Inputs for one update check.

    Attributes:
        base_branch: Branch that would receive a future pull request.
        target_branch: Branch that would carry the update commit.
        gh_token: Token for GitHub API access; never rendered.
        working_directory: Path to the package manifest, relative to the
            repository root.
        debug: Enable debug logging.

    Example:
        >>> config = UpdateCheckConfig(
        ...     base_branch="main",
        ...     target_branch="deps/update",
        ...     gh_token="abc123",
        ...     working_directory="web",
        ... )
        >>> "abc123" in repr(config)
        False
    """

    model_config = ConfigDict(frozen=True)

    base_branch: str
    target_branch: str
    gh_token: SecretStr
    working_directory: str
    debug: bool = False

    @field_validator("base_branch", "target_branch", "working_directory", mode="before")
    @classmethod
    def normalize_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class UpdateCheckState(str, Enum):
    """Steps of an update check, in execution order."""

    VALIDATING = "validating"
    UPDATING = "updating"
    CHECKING = "checking"
    REPORTING = "reporting"
    DONE = "done"
    INVALID = "invalid"


@dataclass(frozen=True)
class ManifestChange:
    """One ``git status --short`` entry for a manifest file."""

    status: str
    path: str


@dataclass(frozen=True)
class UpdateCheckOutcome:
    state: UpdateCheckState
    updates_available: bool
    changes: tuple[ManifestChange, ...] = ()
    status_output: str = ""
