# src/goembed/cli.py
"""goembed Command Line Interface.

Entry point for the goembed CLI tool.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from pydantic import ValidationError

from goembed import __version__
from goembed.contracts import EmbedError, PackageDetectionError
from goembed.core.config import EmbedSettings, load_settings

if TYPE_CHECKING:
    from goembed.engine.orchestrator import SkippedInput

__all__ = ["app"]

USAGE_EPILOG = (
    "By default goembed writes one Go file per input, named after the input with .go appended. "
    "--output overrides this by writing all inputs to a single file. The package name is "
    "detected from the Go sources in the output directory unless --package is given."
)

app = typer.Typer(
    name="goembed",
    help="Embed binary files into Go source as byte-slice literals.",
    epilog=USAGE_EPILOG,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"goembed version {__version__}")
        raise typer.Exit()


def _fail(message: str, error: BaseException | None = None) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    # Secondary failures attached with add_note (e.g. compressor finalization)
    for note in getattr(error, "__notes__", ()):
        typer.secho(f"  {note}", fg=typer.colors.RED, err=True)
    return typer.Exit(1)


def _report_skip(skipped: SkippedInput) -> None:
    typer.secho(f"Skipped {skipped.name}: {skipped.reason}", fg=typer.colors.YELLOW, err=True)


def _resolve_settings(
    settings_file: Path | None,
    *,
    package: str | None,
    output: Path | None,
    gzip: bool,
    sha1: bool,
) -> EmbedSettings:
    """Load settings, then apply command-line flags on top."""
    base = load_settings(settings_file)

    overrides: dict[str, object] = {}
    if package is not None:
        overrides["package"] = package
    if output is not None:
        overrides["output"] = output
    if gzip:
        overrides["compress"] = True
    if sha1:
        overrides["sha1"] = True

    if not overrides:
        return base
    return EmbedSettings.model_validate({**base.model_dump(), **overrides})


@app.command()
def main(
    ctx: typer.Context,
    files: list[str] | None = typer.Argument(
        None,
        metavar="FILE...",
        help="Input files to embed.",
        show_default=False,
    ),
    package: str | None = typer.Option(
        None,
        "--package",
        "-p",
        help="Package name in output file(s).",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output all data to this file.",
        dir_okay=False,
    ),
    gzip: bool = typer.Option(
        False,
        "--gzip",
        "-z",
        help="Compress data with gzip before embedding.",
    ),
    sha1: bool = typer.Option(
        False,
        "--sha1",
        help="Also embed SHA1 hash of data.",
    ),
    settings_file: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file (GOEMBED_* env vars override it).",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Embed FILE... as Go []byte declarations."""
    from goembed.core.logging import configure_logging
    from goembed.engine.orchestrator import Orchestrator

    configure_logging(json_output=json_logs, level="DEBUG" if verbose else "WARNING")

    if not files:
        typer.echo(ctx.get_usage(), err=True)
        typer.echo(f"Try '{ctx.command_path} --help' for help.", err=True)
        raise typer.Exit(2)

    try:
        settings = _resolve_settings(settings_file, package=package, output=output, gzip=gzip, sha1=sha1)
    except FileNotFoundError as e:
        raise _fail(f"Error: {e}") from None
    except ValidationError as e:
        raise _fail(f"Invalid settings:\n{e}") from None

    try:
        result = Orchestrator(settings, on_skip=_report_skip).run(files)
    except PackageDetectionError as e:
        raise _fail(f"Failed to determine package name: {e}", e) from None
    except EmbedError as e:
        raise _fail(f"Failed to embed data: {e}", e) from None
    except OSError as e:
        raise _fail(f"Error: {e}", e) from None

    if not result.ok:
        raise typer.Exit(1)
