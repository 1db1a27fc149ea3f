"""CLI commands using Typer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from fs_utils.config import Settings
    from fs_utils.context import AppContext

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from fs_utils import __version__
from fs_utils.console import ConsoleOutput
from fs_utils.context import create_context
from fs_utils.errors import FsUtilsError
from fs_utils.paths import destination_directory

app = typer.Typer(
    name="fs-utils",
    help="Filesystem convenience commands: copy, head, emptiness check and cleanup",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")

output = ConsoleOutput()

# CLI key -> Settings field
CONFIG_KEYS = {
    "head-limit": "head_limit",
    "truncation-message": "truncation_message",
    "follow-symlinks": "follow_symlinks",
}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"fs-utils v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send debug logs to the terminal when verbose."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=output.console, rich_tracebacks=True)],
        )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Filesystem convenience commands."""
    configure_logging(verbose)


def _load_settings(ctx: AppContext) -> Settings:
    """Load settings, exiting on an invalid config file."""
    try:
        return ctx.config.load()
    except ValueError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e


# ============================================================================
# Folder Commands
# ============================================================================


@app.command("is-empty")
def is_empty(
    path: Annotated[Path, typer.Argument(help="Folder to inspect")],
    _context=None,
) -> None:
    """Check whether a folder is empty."""
    ctx = _context or create_context()
    result = ctx.inspector.is_folder_empty(path)

    if not result.success:
        output.show_error(result.error or "Check failed")
        raise typer.Exit(1)

    if result.is_empty:
        output.show_info(f"'{path}' is empty")
    else:
        output.show_info(f"'{path}' is not empty")


@app.command("clean")
def clean(
    path: Annotated[Path, typer.Argument(help="Folder to empty")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    _context=None,
) -> None:
    """Delete everything inside a folder, keeping the folder itself."""
    ctx = _context or create_context()

    if not yes and not output.confirm(f"Delete all contents of '{path}'?"):
        output.show_warning("Cleanup aborted")
        raise typer.Exit(1)

    result = ctx.cleaner.cleanup_folder(path)
    if not result.success:
        output.show_error(result.error or "Cleanup failed")
        if result.removed:
            output.show_warning(f"{result.removed} entries were removed before the failure")
        raise typer.Exit(1)

    output.show_success(f"Removed {result.removed} entries from '{path}'")


# ============================================================================
# Copy Commands
# ============================================================================


@app.command("destination")
def destination(
    source: Annotated[Path, typer.Argument(help="Source directory")],
    dest: Annotated[Path, typer.Argument(help="Destination root")],
) -> None:
    """Print the directory a copy of SOURCE into DEST would create."""
    try:
        composed = destination_directory(source, dest)
    except FsUtilsError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e
    output.show_text(str(composed))


@app.command("copy")
def copy(
    source: Annotated[Path, typer.Argument(help="Source directory")],
    dest: Annotated[Path, typer.Argument(help="Destination root")],
    follow_symlinks: Annotated[
        bool | None,
        typer.Option(
            "--follow-symlinks/--no-follow-symlinks",
            help="Copy link targets instead of links (default from config)",
        ),
    ] = None,
    _context=None,
) -> None:
    """Copy SOURCE into DEST/<name of SOURCE>.

    Refuses to run if that directory already exists. A failed copy is not
    rolled back.
    """
    ctx = _context or create_context()
    if follow_symlinks is None:
        follow_symlinks = _load_settings(ctx).follow_symlinks

    result = ctx.make_copier(follow_symlinks).copy_directory(source, dest)
    if not result.success:
        output.show_error(result.error or "Copy failed")
        if result.entries_copied:
            output.show_warning(
                f"{result.entries_copied} entries were copied before the failure "
                "and were left in place"
            )
        raise typer.Exit(1)

    output.show_success(f"Copied {result.entries_copied} entries to '{result.destination}'")


# ============================================================================
# Read Commands
# ============================================================================


@app.command("head")
def head(
    path: Annotated[Path, typer.Argument(help="File to read")],
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", min=0, help="Bytes to read (default from config)")
    ] = None,
    message: Annotated[
        str | None, typer.Option("--message", "-m", help="Text appended when the file is cut")
    ] = None,
    no_message: Annotated[
        bool, typer.Option("--no-message", help="Never append a truncation message")
    ] = False,
    raw: Annotated[
        bool, typer.Option("--raw", help="Write the bytes unchanged instead of decoding")
    ] = False,
    _context=None,
) -> None:
    """Print the first bytes of a file, like head -c."""
    ctx = _context or create_context()
    settings = _load_settings(ctx)
    byte_limit = settings.head_limit if limit is None else limit

    if raw:
        raw_result = ctx.reader.head(path, byte_limit)
        if not raw_result.success:
            output.show_error(raw_result.error or "Read failed")
            raise typer.Exit(1)
        sys.stdout.buffer.write(raw_result.data or b"")
        sys.stdout.buffer.flush()
        return

    if no_message:
        result = ctx.reader.head_to_string(path, byte_limit)
    else:
        truncation_message = settings.truncation_message if message is None else message
        result = ctx.reader.head_to_string_with_message(path, byte_limit, truncation_message)

    if not result.success:
        output.show_error(result.error or "Read failed")
        raise typer.Exit(1)
    output.show_text(result.text or "")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _context or create_context()
    settings = _load_settings(ctx)
    output.show_settings(settings, str(ctx.config.config_file))


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Configuration key")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
    _context=None,
) -> None:
    """Set a configuration value."""
    ctx = _context or create_context()

    field_name = CONFIG_KEYS.get(key)
    if field_name is None:
        output.show_error(f"Unknown configuration key: {key}")
        raise typer.Exit(1)

    settings = _load_settings(ctx)
    try:
        setattr(settings, field_name, value)
    except ValidationError as e:
        output.show_error(f"Invalid value for {key}: {value}")
        raise typer.Exit(1) from e

    ctx.config.save(settings)
    output.show_success(f"Set {key} to {value}")


if __name__ == "__main__":
    app()
