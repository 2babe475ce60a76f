"""Configuration loading for dependency-update runs.

Inputs are read once from the environment in GitHub Actions form
(``INPUT_BASE-BRANCH`` and so on) and frozen into an ``UpdateCheckConfig``.
"""

from __future__ import annotations

from typing import Mapping

from pydantic import ValidationError

from . import actions, log
from .models import UpdateCheckConfig
from .services.errors import ValidationFailedError

BASE_BRANCH_INPUT = "base-branch"
TARGET_BRANCH_INPUT = "target-branch"
GH_TOKEN_INPUT = "gh-token"
WORKING_DIRECTORY_INPUT = "working-directory"
DEBUG_INPUT = "debug"


def load_config(environ: Mapping[str, str] | None = None) -> UpdateCheckConfig:
    """Read and freeze the action inputs.

    The token is registered as a secret as soon as it is read, before any
    other input is touched. A ``debug`` input of true lowers the log level.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The immutable run configuration.

    Raises:
        ValidationFailedError: A required input is missing or ``debug`` is
            not a boolean.
    """
    gh_token = actions.get_input(GH_TOKEN_INPUT, required=True, environ=environ)
    actions.set_secret(gh_token)

    base_branch = actions.get_input(BASE_BRANCH_INPUT, required=True, environ=environ)
    target_branch = actions.get_input(
        TARGET_BRANCH_INPUT, required=True, environ=environ
    )
    working_directory = actions.get_input(
        WORKING_DIRECTORY_INPUT, required=True, environ=environ
    )
    debug = actions.get_boolean_input(DEBUG_INPUT, environ=environ)

    try:
        config = UpdateCheckConfig(
            base_branch=base_branch,
            target_branch=target_branch,
            gh_token=gh_token,
            working_directory=working_directory,
            debug=debug,
        )
    except ValidationError as exc:
        raise ValidationFailedError(f"invalid configuration: {exc}") from exc

    if config.debug:
        log.set_level("debug")
    return config
