"""Structured terminal logging for dependency-update runs.

Every message passes through :func:`redact` before it is printed, so values
registered with :func:`set_secret` never reach the console. Under GitHub
Actions, debug, warning and error lines are emitted as workflow commands.
"""

from __future__ import annotations

import os
import sys
from enum import IntEnum

from rich.console import Console
from rich.text import Text


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


_LEVEL_BY_NAME = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "success": LogLevel.SUCCESS,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}
LEVEL_NAMES = ("trace", "debug", "info", "success", "warning", "error")
_DEFAULT_LEVEL = LogLevel.INFO
_MASK = "***"
_configured_level = None
_no_color: bool | None = None
_secrets: set[str] = set()


def _normalize_level(value: str | None) -> LogLevel:
    if value is None:
        return _DEFAULT_LEVEL
    normalized = value.strip().lower()
    if not normalized:
        return _DEFAULT_LEVEL
    return _LEVEL_BY_NAME.get(normalized, _DEFAULT_LEVEL)


def configured_level() -> LogLevel:
    global _configured_level
    if _configured_level is None:
        _configured_level = _normalize_level(
            os.environ.get("DEPENDENCY_UPDATE_LOG_LEVEL")
        )
    return _configured_level


def set_level(value: str | None) -> None:
    """Set the active log level."""
    global _configured_level
    _configured_level = _normalize_level(value)


def set_no_color(value: bool) -> None:
    """Force colour output off (``True``) or back to environment detection."""
    global _no_color
    _no_color = True if value else None


def is_enabled(level: LogLevel) -> bool:
    return level >= configured_level()


def in_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "").strip().lower() == "true"


def set_secret(value: str) -> None:
    """Register a value that must be masked in every emitted message.

    Under GitHub Actions the runner is told to mask it too, which covers
    output that does not pass through this module (subprocess streams).
    The ``::add-mask::`` directive is consumed by the runner and is not
    shown in the job log.
    """
    if not value:
        return
    _secrets.add(value)
    if in_github_actions():
        _console(stderr=False).print(Text(f"::add-mask::{escape_data(value)}"))


def reset() -> None:
    """Forget registered secrets and configured level/colour overrides."""
    global _configured_level, _no_color
    _secrets.clear()
    _configured_level = None
    _no_color = None


def redact(message: str) -> str:
    """Replace every registered secret in ``message`` with ``***``."""
    # Longest first so a secret containing another is masked whole.
    for secret in sorted(_secrets, key=len, reverse=True):
        message = message.replace(secret, _MASK)
    return message


def escape_data(value: str) -> str:
    """Escape a workflow-command payload.

    Example:
        >>> escape_data("50%\\ndone")
        '50%25%0Adone'
    """
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _color_disabled() -> bool:
    if _no_color is not None:
        return _no_color
    return bool(
        os.environ.get("NO_COLOR") or os.environ.get("DEPENDENCY_UPDATE_NO_COLOR")
    )


def _console(*, stderr: bool) -> Console:
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=_color_disabled(),
    )


def _default_style(level: LogLevel) -> str:
    if level is LogLevel.TRACE:
        return "dim"
    if level is LogLevel.DEBUG:
        return "cyan"
    if level is LogLevel.SUCCESS:
        return "green"
    if level is LogLevel.WARNING:
        return "yellow"
    if level is LogLevel.ERROR:
        return "bold red"
    return ""


def _workflow_command(level: LogLevel) -> str | None:
    if level <= LogLevel.DEBUG:
        return "debug"
    if level is LogLevel.WARNING:
        return "warning"
    if level is LogLevel.ERROR:
        return "error"
    return None


def format_message(level: LogLevel, message: str) -> str:
    """Return the redacted line that ``emit`` would print for ``message``."""
    text = redact(message)
    if in_github_actions():
        command = _workflow_command(level)
        if command is not None:
            return f"::{command}::{escape_data(text)}"
        return text
    if level is LogLevel.WARNING:
        return f"warning: {text}"
    if level is LogLevel.ERROR:
        return f"error: {text}"
    return text


def emit(
    level: LogLevel,
    message: str,
    *,
    style: str | None = None,
    stderr: bool | None = None,
) -> None:
    if not is_enabled(level):
        return
    target_stderr = stderr if stderr is not None else level >= LogLevel.WARNING
    line = format_message(level, message)
    # The runner only parses workflow commands that start the line unstyled.
    if in_github_actions() and _workflow_command(level) is not None:
        text = Text(line)
    else:
        text = Text(line, style=style or _default_style(level))
    _console(stderr=target_stderr).print(text)


def trace(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.TRACE, message, style=style, stderr=False)


def debug(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.DEBUG, message, style=style, stderr=False)


def info(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.INFO, message, style=style, stderr=False)


def success(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.SUCCESS, message, style=style, stderr=False)


def warning(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.WARNING, message, style=style, stderr=True)


def error(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.ERROR, message, style=style, stderr=True)
