from __future__ import annotations

from pathlib import Path

from dependency_update import exec as exec_util
from dependency_update.models import UpdateCheckConfig

TOKEN = "ghp_s3cretT0kenValue"


def make_config(**overrides: object) -> UpdateCheckConfig:
    data: dict[str, object] = {
        "base_branch": "main",
        "target_branch": "update-dependencies",
        "gh_token": TOKEN,
        "working_directory": "web",
    }
    data.update(overrides)
    return UpdateCheckConfig(**data)


def input_env(**overrides: str) -> dict[str, str]:
    env = {
        "INPUT_BASE-BRANCH": "main",
        "INPUT_TARGET-BRANCH": "update-dependencies",
        "INPUT_GH-TOKEN": TOKEN,
        "INPUT_WORKING-DIRECTORY": "web",
    }
    env.update(overrides)
    return env


class FakeTools:
    """Records calls in order and returns canned status output."""

    def __init__(self, status_output: str = "", *, update_error: Exception | None = None):
        self.status_output = status_output
        self.update_error = update_error
        self.calls: list[tuple[str, Path]] = []

    def update_dependencies(self, working_dir: Path) -> None:
        self.calls.append(("update", working_dir))
        if self.update_error is not None:
            raise self.update_error

    def modified_manifests(self, working_dir: Path) -> str:
        self.calls.append(("status", working_dir))
        return self.status_output


class RecordingRunner:
    """Command runner returning queued results and recording requests."""

    def __init__(self, *results: exec_util.CommandResult | None):
        self._results = list(results)
        self.requests: list[exec_util.CommandRequest] = []

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        return self._results.pop(0)


def ok(argv: tuple[str, ...], stdout: str = "", stderr: str = "") -> exec_util.CommandResult:
    return exec_util.CommandResult(argv=argv, returncode=0, stdout=stdout, stderr=stderr)
