"""Command-line entry point for dependency-update."""

from pathlib import Path
from typing import Optional

import typer

from . import __version__, actions
from . import log as dependency_update_log
from .config import load_config
from .ports import CliDependencyTools, DependencyTools
from .services.errors import ServiceFailure
from .services.update_check import UpdateCheckRequest, UpdateCheckService

app = typer.Typer(
    name="dependency-update",
    help="Detect pending npm dependency updates in a working directory.",
    add_completion=False,
    no_args_is_help=True,
)


def _default_tools() -> DependencyTools:
    return CliDependencyTools()


def _validate_log_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in dependency_update_log.LEVEL_NAMES:
        expected = ", ".join(dependency_update_log.LEVEL_NAMES)
        raise typer.BadParameter(f"expected one of: {expected}")
    return normalized


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="log level (trace|debug|info|success|warning|error)",
        callback=_validate_log_level,
    ),
    no_color: bool = typer.Option(False, "--no-color", help="disable colour output"),
    version: bool = typer.Option(
        False,
        "--version",
        help="show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    del version
    if log_level is not None:
        dependency_update_log.set_level(log_level)
    if no_color:
        dependency_update_log.set_no_color(True)


@app.command("run")
def run_cmd(
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        help="repository root the working-directory input is relative to",
        file_okay=False,
    ),
) -> None:
    """Run npm update and report whether package manifests changed."""
    try:
        config = load_config()
        service = UpdateCheckService(_default_tools())
        service(UpdateCheckRequest(config=config, root=root))
    except ServiceFailure as exc:
        actions.set_failed(str(exc))
        if exc.recovery_hint:
            dependency_update_log.warning(f"hint: {exc.recovery_hint}")
        raise typer.Exit(code=1) from exc


def main() -> None:
    app(prog_name="dependency-update")


if __name__ == "__main__":
    main()
