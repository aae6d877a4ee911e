#!/usr/bin/env python3
"""
mtimport CLI
------------

Command-line entry point for importing a Movable Type export.

Reads the export from standard input (or ``--input``) and writes one HTML
file per entry into OUTDIR, creating it if needed.

Usage:
    mtimport site/_posts < export.txt
    mtimport -i export.txt --quote-style yaml site/_posts
    mtimport --dry-run -i export.txt site/_posts
"""
from __future__ import annotations

import shlex
from pathlib import Path
from typing import IO

import click

from mtimport.core.cli import setup_logger
from mtimport.core.logging_manager import ImportLogger, handle_cli_error
from mtimport.core.paths import DEFAULT_TEXTILE_COMMAND, LOG_DIR
from mtimport.pipeline.mt2html import import_stream
from mtimport.utils.frontmatter import QUOTE_POLICIES, get_quote_policy
from mtimport.utils.textile import make_converter


@click.command()
@click.argument("outdir", type=click.Path(file_okay=False))
@click.option(
    "-i",
    "--input",
    "input_stream",
    type=click.File("rb"),
    default="-",
    show_default=True,
    help="Export file to read ('-' for standard input)",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    show_default=True,
    help="Directory for log files",
)
@click.option(
    "--textile-command",
    default=" ".join(DEFAULT_TEXTILE_COMMAND),
    show_default=True,
    help="Command converting textile on stdin to HTML on stdout",
)
@click.option(
    "--quote-style",
    type=click.Choice(sorted(QUOTE_POLICIES)),
    default="json",
    show_default=True,
    help="Quoting used for front matter values",
)
@click.option("--fix-encoding", is_flag=True, help="Repair mojibake in the export with ftfy")
@click.option("--dry-run", is_flag=True, help="Parse and render without writing files")
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(
    ctx: click.Context,
    outdir: str,
    input_stream: IO[bytes],
    log_dir: str,
    textile_command: str,
    quote_style: str,
    fix_encoding: bool,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Convert a Movable Type export into one HTML file per entry in OUTDIR."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logger: ImportLogger = setup_logger(Path(log_dir), "import")
    ctx.obj["logger"] = logger

    output_dir = Path(outdir)
    try:
        if not dry_run:
            output_dir.mkdir(parents=True, exist_ok=True)

        stats = import_stream(
            input_stream,
            output_dir,
            converter=make_converter(shlex.split(textile_command)),
            quote_policy=get_quote_policy(quote_style),
            fix_encoding=fix_encoding,
            dry_run=dry_run,
            logger=logger,
        )
    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "import",
            additional_context={"outdir": outdir},
        )
        return

    verb = "Would write" if dry_run else "Wrote"
    click.echo(f"{verb} {stats.entries_written} entries to {output_dir}")
    click.echo(f"  {stats.summary()}")


if __name__ == "__main__":
    cli()
