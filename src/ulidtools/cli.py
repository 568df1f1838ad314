"""Command-line interface for ulidtools.

Example:
    >>> # From terminal:
    >>> # ulidtools --version
    >>> # ulidtools generate
    >>> # ulidtools parse 018bcfe5-6800-7a3c-9d0e-5f4a3b2c1d0e
    >>> # ulidtools parse 01ARZ3NDEKTSV4RRFFQ69G5FAV
    >>> # ulidtools -v --log-format json parse 01ARZ3NDEKTSV4RRFFQ69G5FAV
"""

from enum import Enum
from typing import Annotated, NoReturn

import typer

from ulidtools import __version__
from ulidtools.codec import generate_pair, parse_identifier
from ulidtools.errors import UlidToolsError, render_error
from ulidtools.models.ids import IdentifierPair
from ulidtools.observability.logging import bind_context, configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="ulidtools",
    help="Generate UUIDv7/ULID pairs and convert between the two encodings.",
    no_args_is_help=True,
    add_completion=False,
)

# Exit code for a conversion error (usage errors keep typer's code 2)
ERROR_EXIT_CODE = 1


class LogFormat(str, Enum):
    """Renderer for diagnostic logs on stderr."""

    CONSOLE = "console"
    JSON = "json"


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show ulidtools version and exit.",
    callback=_version_callback,
    is_eager=True,
)


@app.callback()
def cli(
    version: bool = VERSION_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    log_format: LogFormat = typer.Option(
        LogFormat.CONSOLE, "--log-format", help="Format of diagnostic logs."
    ),
) -> None:
    """ulidtools CLI entrypoint."""
    configure_logging(
        log_format=log_format.value,
        log_level="DEBUG" if verbose else None,
        force=True,
    )


def _label(text: str) -> str:
    return typer.style(text, fg=typer.colors.MAGENTA, bold=True)


def _value(text: str) -> str:
    return typer.style(text, underline=True)


def _print_pair(pair: IdentifierPair) -> None:
    """Print the three-line ULID / UUIDv7 / Timestamp block."""
    typer.echo(f"{_label('ULID')}: {_value(str(pair.lid))}")
    typer.echo(f"{_label('UUIDv7')}: {_value(str(pair.tid7))}")
    typer.echo(f"{_label('Timestamp')}: {pair.timestamp}")


def _fail(error: UlidToolsError) -> NoReturn:
    """Report an error as one red line on stderr and exit non-zero."""
    logger.info("ulidtools.cli.error", code=error.code, details=error.details)
    typer.secho(render_error(error), fg=typer.colors.RED, err=True)
    raise typer.Exit(ERROR_EXIT_CODE) from error


@app.command("generate")
def generate() -> None:
    """Generate UUIDv7 and ULID."""
    bind_context(command="generate")
    try:
        pair = generate_pair()
    except UlidToolsError as exc:
        _fail(exc)
    _print_pair(pair)


@app.command("parse")
def parse(
    value: Annotated[
        str,
        typer.Argument(metavar="INPUT", help="UUID or ULID to parse."),
    ],
) -> None:
    """Parse UUID or ULID."""
    bind_context(command="parse")
    try:
        pair = parse_identifier(value)
    except UlidToolsError as exc:
        _fail(exc)
    _print_pair(pair)


def main() -> None:
    """Run the ulidtools CLI."""
    app()


if __name__ == "__main__":
    main()
