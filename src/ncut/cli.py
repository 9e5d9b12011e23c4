import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ncut.config import apply_overrides, load_settings
from ncut.errors import NcutError, SelectionError
from ncut.selection import effective_delimiter, from_options
from ncut.stream import cut_stream, open_input

app = typer.Typer(help="Cut fields out of delimited text by number, header name or character.")
err_console = Console(stderr=True)
logger = logging.getLogger("ncut")


def _version() -> str:
    try:
        return version("ncut")
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ncut {_version()}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def cut(
    file: Path | None = typer.Argument(None, help="Input file; stdin when omitted or '-'."),
    field: str | None = typer.Option(
        None, "--field", "-f", help="Field numbers and ranges, e.g. 1,3-4,6-."
    ),
    field_by_title: str | None = typer.Option(
        None, "--field-by-title", "-t", help="Comma-separated names looked up in the first line."
    ),
    characters: str | None = typer.Option(
        None, "--characters", "-c", help="Character positions and ranges, e.g. 2,4-6."
    ),
    delimiter: str | None = typer.Option(
        None, "--delimiter", "-d", help="Field delimiter (default TAB; '\\t' for tab)."
    ),
    encoding: str | None = typer.Option(None, "--encoding", help="Input encoding."),
    config: Path | None = typer.Option(
        None, "--config", help="YAML/JSON file with delimiter/encoding defaults."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Print the selected fields of every input line."""
    _setup_logging(verbose)
    try:
        selection = from_options(field, field_by_title, characters)
    except SelectionError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        settings = apply_overrides(load_settings(config), delimiter, encoding)
        delim = effective_delimiter(selection, settings.delimiter)
        logger.debug("Selection %r with delimiter %r", selection, delim)
        with open_input(file, settings.encoding) as source:
            cut_stream(source, selection, delim, sys.stdout)
    except NcutError as exc:
        err_console.print(
            f"[bold red]ncut:[/] {escape(str(exc))}", highlight=False, soft_wrap=True
        )
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
