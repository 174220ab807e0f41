"""Main CLI application entry point.

Defines the Typer application: validates the arguments, merges them with
the user defaults and runs a RandomFileCopier, printing its progress lines.
"""

import logging
import random
import signal
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.logging import RichHandler

from randcopy import __version__
from randcopy.core.config import ConfigError, load_defaults, resolve_config
from randcopy.core.copier import RandomFileCopier
from randcopy.errors import ArgumentValidationError, RandomCopyError
from randcopy.utils.cancel import CancellationToken
from randcopy.utils.formatting import err_console, print_error, print_line, print_warning

# Exit code of a run stopped with Ctrl-C
EXIT_CANCELLED = 130

app = typer.Typer(
    name="randcopy",
    help="Copy a random selection of files from a directory tree.",
    add_completion=False,
    rich_markup_mode="rich",
    # Lets a negative MAX_FILES reach validation instead of option parsing
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"randcopy version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    source: Annotated[
        Path,
        typer.Argument(help="Directory tree to pick files from."),
    ],
    destination: Annotated[
        Path,
        typer.Argument(help="Directory to copy files to (created if missing)."),
    ],
    max_files: Annotated[
        str,
        typer.Argument(help="The maximum number of files (0 = no limit)."),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show every copied file."),
    ] = False,
    space: Annotated[
        int | None,
        typer.Option(
            "--space",
            "-s",
            help="The maximum bytes to copy in the destination.",
        ),
    ] = None,
    extension: Annotated[
        list[str] | None,
        typer.Option(
            "--extension",
            "-e",
            help="A required extension of a file to be copied (repeatable).",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Read defaults from this TOML file."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed the random selection."),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Copy random files from SOURCE and its subdirectories to DESTINATION.

    Files are limited by count (MAX_FILES), by total size (--space, or the
    free space of the destination) and optionally by extension. Existing
    files are never overwritten: duplicates are renamed to name(1).ext,
    name(2).ext and so on.
    """
    if debug:
        _enable_debug_logging()

    try:
        defaults = load_defaults(config_path)
        config = resolve_config(
            source,
            destination,
            max_files,
            extensions=extension or (),
            verbose=verbose,
            max_bytes=space,
            defaults=defaults,
        )
    except (ArgumentValidationError, ConfigError) as e:
        _fail_with_usage(ctx, str(e))

    token = CancellationToken()
    copier = RandomFileCopier(
        config.source,
        config.destination,
        config.max_files,
        extensions=config.extensions,
        max_bytes=config.max_bytes,
        verbose=config.verbose,
        sink=print_line,
        rng=random.Random(seed),
        cancel_token=token,
    )

    previous_handler = signal.signal(signal.SIGINT, lambda _signum, _frame: token.cancel())
    try:
        outcome = copier.run()
    except RandomCopyError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    if outcome.cancelled:
        print_warning("Interrupted, stopped early")
        raise typer.Exit(code=EXIT_CANCELLED)


def _fail_with_usage(ctx: typer.Context, detail: str) -> NoReturn:
    """Print an error and the usage line, then exit with code 1."""
    print_error(detail)
    err_console.print()
    err_console.print(ctx.get_usage(), markup=False, highlight=False)
    err_console.print(f"Try '{ctx.command_path} --help' for help.", markup=False, highlight=False)
    raise typer.Exit(code=1)


def _enable_debug_logging() -> None:
    """Route randcopy debug records to stderr through Rich."""
    logger = logging.getLogger("randcopy")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


if __name__ == "__main__":
    app()
