"""Click CLI definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import click
from rich.console import Console
from rich.table import Table

from subrip import __version__
from subrip.core.errors import ParseError
from subrip.core.subtitle_builder import build_file, render
from subrip.core.subtitle_parser import check_encoding, parse_file
from subrip.utils.config import build_config, parser_options
from subrip.utils.logger import setup_logging


def _load_config(encoding: str | None, allow_unterminated: bool, verbose: bool) -> dict[str, Any]:
    cli_args = {
        "encoding": encoding,
        # Flags only override when given, so env settings still apply
        "allow_unterminated": True if allow_unterminated else None,
        "verbose": True if verbose else None,
    }
    config = build_config(cli_args=cli_args)
    setup_logging(verbose=config["verbose"])
    try:
        check_encoding(config["encoding"])
    except ParseError as e:
        raise click.BadParameter(str(e), param_hint="'--encoding' / SUBRIP_ENCODING")
    return config


def parser_flags(func: Callable) -> Callable:
    func = click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output")(func)
    func = click.option(
        "--allow-unterminated",
        is_flag=True,
        default=False,
        help="Accept a final entry without a trailing blank line",
    )(func)
    func = click.option("--encoding", default=None, help="Text encoding (default: utf-8)")(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="subrip")
def cli() -> None:
    """subrip - Parse and render SubRip (.srt) subtitles."""


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@parser_flags
def check(
    files: tuple[Path, ...],
    encoding: str | None,
    allow_unterminated: bool,
    verbose: bool,
) -> None:
    """Check that each FILE parses."""
    config = _load_config(encoding, allow_unterminated, verbose)
    failed = 0
    for file in files:
        try:
            document = parse_file(file, **parser_options(config))
        except ParseError as e:
            failed += 1
            click.echo(f"FAIL: {file}: {e}", err=True)
            continue
        click.echo(f"OK: {file} ({len(document)} entries)")
    if failed:
        raise click.exceptions.Exit(1)


@cli.command()
@click.argument("file", type=click.Path(path_type=Path))
@parser_flags
def show(
    file: Path,
    encoding: str | None,
    allow_unterminated: bool,
    verbose: bool,
) -> None:
    """Print the entries of FILE as a table."""
    config = _load_config(encoding, allow_unterminated, verbose)
    try:
        document = parse_file(file, **parser_options(config))
    except ParseError as e:
        raise click.ClickException(str(e))

    table = Table(title=str(file))
    table.add_column("#", justify="right")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Text")
    for entry in document:
        table.add_row(str(entry.index), str(entry.start_time), str(entry.end_time), entry.text)
    Console().print(table)


@cli.command("render")
@click.argument("file", type=click.Path(path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Output file path")
@parser_flags
def render_cmd(
    file: Path,
    output: Path | None,
    encoding: str | None,
    allow_unterminated: bool,
    verbose: bool,
) -> None:
    """Parse FILE and write it back out in normalized form."""
    config = _load_config(encoding, allow_unterminated, verbose)
    try:
        document = parse_file(file, **parser_options(config))
        if output is None:
            click.echo(render(document), nl=False)
        else:
            build_file(document, output, encoding=config["encoding"])
            click.echo(f"Wrote: {output}")
    except ParseError as e:
        raise click.ClickException(str(e))


@cli.command()
def config() -> None:
    """Show current configuration."""
    cfg = build_config()
    for key, val in sorted(cfg.items()):
        click.echo(f"  {key}: {val}")
