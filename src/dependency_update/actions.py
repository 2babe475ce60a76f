"""GitHub Actions runtime helpers: inputs, secrets and failure reporting."""

from __future__ import annotations

import os
from typing import Mapping

from . import log
from .services.errors import ValidationFailedError

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


def input_env_name(name: str) -> str:
    """Return the environment variable the runner uses for an input.

    Example:
        >>> input_env_name("base-branch")
        'INPUT_BASE-BRANCH'
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    *,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Read a trimmed action input.

    Args:
        name: Input name as declared in ``action.yml``.
        required: Fail when the input is missing or blank.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The trimmed value, or an empty string for a missing optional input.

    Raises:
        ValidationFailedError: A required input is missing.
    """
    env = os.environ if environ is None else environ
    value = env.get(input_env_name(name), "").strip()
    if required and not value:
        raise ValidationFailedError(f"Input required and not supplied: {name}")
    return value


def get_boolean_input(
    name: str,
    *,
    required: bool = False,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Read a YAML 1.2 core-schema boolean input.

    Missing optional inputs read as ``False``.
    """
    value = get_input(name, required=required, environ=environ)
    if not value:
        return False
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValidationFailedError(
        'Input does not meet YAML 1.2 "Core Schema" specification: '
        f"{name}\nSupport boolean input list: "
        "`true | True | TRUE | false | False | FALSE`"
    )


def set_secret(value: str) -> None:
    """Mark ``value`` as secret so it is masked in all later output."""
    log.set_secret(value)


def set_failed(message: str) -> None:
    """Report a terminal failure for the step.

    The caller is responsible for exiting non-zero afterwards.
    """
    log.error(message)
