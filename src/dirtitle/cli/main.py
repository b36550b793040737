from __future__ import annotations

from typing import Annotated, NoReturn

import typer
from result import is_err

from dirtitle.common import create_logger, resolve_directory_path, setup_cli_logging
from dirtitle.constants import APP_NAME
from dirtitle.settings import get_settings
from dirtitle.titles import TitleContext, TitleError, get_title

logger = create_logger("cli")

USAGE = f"Usage: {APP_NAME} [--long] [--show-command] DIR_PATH"

DirPathsArgument = Annotated[
    list[str] | None,
    typer.Argument(metavar="DIR_PATH", show_default=False, help="Directory to title."),
]
LongOption = Annotated[
    bool,
    typer.Option("--long", "-long", help="Show ancestor directories as a breadcrumb."),
]
ShowCommandOption = Annotated[
    bool,
    typer.Option("--show-command", "-show-command", help="Append the running shell command to the short title."),
]

app = typer.Typer(help="Print a terminal title for a directory.", add_completion=False)


@app.command()
def dirtitle(
    dir_paths: DirPathsArgument = None,
    long: LongOption = False,
    show_command: ShowCommandOption = False,
) -> None:
    if not dir_paths or len(dir_paths) != 1:
        _exit_with_error(USAGE)

    context_result = TitleContext.from_settings(get_settings())
    if is_err(context_result):
        _handle_error(context_result.err())

    dir_path = resolve_directory_path(dir_paths[0])
    logger.debug("Computing title", path=dir_path, long=long, show_command=show_command)

    result = get_title(context_result.unwrap(), dir_path, long=long, show_command=show_command)
    if is_err(result):
        _handle_error(result.err())

    typer.echo(result.unwrap())


def _handle_error(error: TitleError) -> NoReturn:
    logger.error("Title computation failed", error=error.message)
    _exit_with_error(error.message)


def _exit_with_error(message: str) -> NoReturn:
    typer.secho(f"{APP_NAME}: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _setup_logging() -> None:
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(settings.logging, settings.paths)


def main() -> None:
    """Entrypoint for the dirtitle CLI."""
    _setup_logging()
    app()
