"""Update-check service: refresh dependencies and report manifest changes.

The run moves through ``validating -> updating -> checking -> reporting ->
done``. A validation failure ends it in ``invalid`` before any tool runs.
Tool failures propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .. import git, log
from ..models import UpdateCheckConfig, UpdateCheckOutcome, UpdateCheckState
from ..ports import DependencyTools
from ..validation import (
    INVALID_BASE_BRANCH,
    INVALID_TARGET_BRANCH,
    INVALID_WORKING_DIRECTORY,
    validate_branch_name,
    validate_directory_name,
)
from .base import BaseService
from .errors import ServiceFailure, ValidationFailedError

LOG_PREFIX = "[dependency-update] :"
UPDATES_AVAILABLE_MESSAGE = "There are updates available!"
NO_UPDATES_MESSAGE = "No updates at this point in time."
DONE_MESSAGE = "Dependency update check complete."

StateListener = Callable[[UpdateCheckState], None]


def _info(message: str) -> None:
    log.info(f"{LOG_PREFIX} {message}")


@dataclass(frozen=True)
class UpdateCheckRequest:
    config: UpdateCheckConfig
    root: Path | None = None

    @property
    def working_dir(self) -> Path:
        directory = Path(self.config.working_directory)
        if self.root is None:
            return directory
        return self.root / directory


class UpdateCheckService(BaseService[UpdateCheckRequest, UpdateCheckOutcome]):
    """Run one dependency update check against a working directory."""

    def __init__(
        self,
        tools: DependencyTools,
        *,
        on_state: StateListener | None = None,
    ) -> None:
        self._tools = tools
        self._on_state = on_state
        self.state = UpdateCheckState.VALIDATING

    def _enter(self, state: UpdateCheckState) -> None:
        self.state = state
        log.trace(f"{LOG_PREFIX} state -> {state.value}")
        if self._on_state is not None:
            self._on_state(state)

    def _run(self, request: UpdateCheckRequest) -> UpdateCheckOutcome:
        config = request.config
        self._enter(UpdateCheckState.VALIDATING)
        self._validate(config)

        _info(f"base branch is {config.base_branch}")
        _info(f"target branch is {config.target_branch}")
        _info(f"working directory is {config.working_directory}")

        working_dir = request.working_dir
        self._enter(UpdateCheckState.UPDATING)
        self._tools.update_dependencies(working_dir)

        self._enter(UpdateCheckState.CHECKING)
        status_output = self._tools.modified_manifests(working_dir)

        self._enter(UpdateCheckState.REPORTING)
        updates_available = len(status_output) > 0
        changes = tuple(git.parse_short_status(status_output))
        if updates_available:
            _info(UPDATES_AVAILABLE_MESSAGE)
            for change in changes:
                log.debug(f"{LOG_PREFIX} {change.status.strip()} {change.path}")
        else:
            _info(NO_UPDATES_MESSAGE)

        self._enter(UpdateCheckState.DONE)
        log.success(f"{LOG_PREFIX} {DONE_MESSAGE}")
        return UpdateCheckOutcome(
            state=UpdateCheckState.DONE,
            updates_available=updates_available,
            changes=changes,
            status_output=status_output,
        )

    def _validate(self, config: UpdateCheckConfig) -> None:
        if not validate_branch_name(config.base_branch):
            raise ValidationFailedError(INVALID_BASE_BRANCH)
        if not validate_branch_name(config.target_branch):
            raise ValidationFailedError(INVALID_TARGET_BRANCH)
        if not validate_directory_name(config.working_directory):
            raise ValidationFailedError(INVALID_WORKING_DIRECTORY)

    def _handle_failure(self, error: ServiceFailure) -> UpdateCheckOutcome:
        if isinstance(error, ValidationFailedError) and (
            self.state is UpdateCheckState.VALIDATING
        ):
            self._enter(UpdateCheckState.INVALID)
        raise error
