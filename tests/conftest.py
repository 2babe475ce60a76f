# ruff: noqa: E402

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import dependency_update.log as dependency_update_log

_ENV_OVERRIDES = (
    "GITHUB_ACTIONS",
    "DEPENDENCY_UPDATE_LOG_LEVEL",
    "DEPENDENCY_UPDATE_NO_COLOR",
    "FORCE_COLOR",
    "TTY_COMPATIBLE",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name)
    for name in _ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    dependency_update_log.reset()
    yield
    dependency_update_log.reset()
