"""Input validators for branch and directory names.

Both predicates require a non-empty, full-string match; a trailing newline
does not pass.

Example:
    >>> validate_branch_name("release/1.2")
    True
    >>> validate_directory_name("release/1.2")
    False
"""

from __future__ import annotations

import re

_BRANCH_NAME_RE = re.compile(r"[A-Za-z0-9_\-./]+")
_DIRECTORY_NAME_RE = re.compile(r"[A-Za-z0-9_\-/]+")

INVALID_BASE_BRANCH = (
    "Invalid base-branch name. Branch names should include only characters, "
    "numbers, hyphens, underscores, dots, and forward slashes."
)
INVALID_TARGET_BRANCH = (
    "Invalid target-branch name. Branch names should include only characters, "
    "numbers, hyphens, underscores, dots, and forward slashes."
)
INVALID_WORKING_DIRECTORY = (
    "Invalid working directory name. Directory names should include only "
    "characters, numbers, hyphens, underscores, and forward slashes."
)


def validate_branch_name(name: str) -> bool:
    """Return whether ``name`` only uses letters, digits, ``-_./``.

    Example:
        >>> validate_branch_name("feat update")
        False
        >>> validate_branch_name("")
        False
    """
    return _BRANCH_NAME_RE.fullmatch(name) is not None


def validate_directory_name(name: str) -> bool:
    """Return whether ``name`` only uses letters, digits, ``-_/``."""
    return _DIRECTORY_NAME_RE.fullmatch(name) is not None
