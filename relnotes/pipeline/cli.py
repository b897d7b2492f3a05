#!/usr/bin/env python3
"""
cli.py
-------------------
Command-line interface for changelog releases.

Commands:
    - check: Validate the changelog without changing anything
    - notes: Print the release notes of the upcoming version
    - release: Date the placeholder entry and archive old entries

Usage:
    # Is the changelog ready?
    relnotes check

    # Release notes for the GitHub release body
    relnotes notes > notes.md

    # Release 2.3.4, keeping 5 entries in the current changelog
    relnotes release 2.3.4 -n 5

    # Preview without touching any file
    relnotes release 2.3.4 --date 2024-01-15 --dry-run
"""
from __future__ import annotations

import click
from datetime import datetime
from pathlib import Path
from typing import Optional

from relnotes.core.cli import setup_logger
from relnotes.core.cli_options import (
    cwd_option,
    dry_run_option,
    num_entries_option,
    release_date_option,
)
from relnotes.core.config import load_config
from relnotes.core.exceptions import ReleaseError
from relnotes.core.logging_manager import RelnotesLogger, handle_cli_error
from relnotes.core.paths import LOG_DIR
from relnotes.pipeline.changelog import check_stage, run_release
from relnotes.pipeline.context import ReleaseContext


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """relnotes - Changelog release tool"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    logger = setup_logger(Path(log_dir), "release")
    ctx.obj["logger"] = logger
    ctx.call_on_close(logger.close)


def _echo_problems(context: ReleaseContext) -> None:
    for warning in context.warnings:
        click.echo(f"⚠️  {warning}", err=True)
    for error in context.errors:
        click.echo(f"❌ {error}", err=True)


@cli.command()
@cwd_option
@click.pass_context
def check(ctx: click.Context, cwd: str) -> None:
    """
    Validate the changelog documents.

    Parses CHANGELOG.md (or the Changelog section of README.md) and
    CHANGELOG_OLD.md, then reports every problem found: missing or duplicate
    placeholder, empty release notes.
    """
    logger: RelnotesLogger = ctx.obj["logger"]
    context = ReleaseContext(cwd=Path(cwd))

    try:
        check_stage(context, logger)
    except Exception as e:
        handle_cli_error(ctx, e, "check", additional_context={"cwd": cwd})

    if context.primary is not None:
        click.echo(
            f"📄 {context.changelog_filename}: {len(context.changelog_entries)} entries "
            f"(prefix '{context.changelog_entry_prefix} ')"
        )
    if context.archive is not None:
        click.echo(
            f"🗄️  {context.archive.path.name}: {len(context.changelog_old_entries)} entries"
        )

    _echo_problems(context)
    if context.has_errors:
        ctx.exit(1)

    click.echo("✅ Changelog is ready for release")


@cli.command()
@cwd_option
@click.pass_context
def notes(ctx: click.Context, cwd: str) -> None:
    """Print the release notes of the upcoming version."""
    logger: RelnotesLogger = ctx.obj["logger"]
    context = ReleaseContext(cwd=Path(cwd))

    try:
        check_stage(context, logger)
        if context.has_errors:
            raise ReleaseError.from_errors(context.errors)
    except Exception as e:
        handle_cli_error(ctx, e, "notes", additional_context={"cwd": cwd})

    click.echo(context.changelog_new)


@cli.command()
@click.argument("version")
@cwd_option
@release_date_option
@num_entries_option
@dry_run_option
@click.pass_context
def release(
    ctx: click.Context,
    version: str,
    cwd: str,
    release_date: Optional[datetime],
    num_changelog_entries: Optional[int],
    dry_run: bool,
) -> None:
    """
    Release VERSION: date the placeholder entry and archive old entries.

    The placeholder heading "## **WORK IN PROGRESS** · Name" becomes
    "## VERSION (DATE) · Name". With a retention count, entries beyond it
    move to the top of CHANGELOG_OLD.md.
    """
    logger: RelnotesLogger = ctx.obj["logger"]
    project_dir = Path(cwd)

    try:
        config = load_config(project_dir).merged(num_changelog_entries=num_changelog_entries)
        context = ReleaseContext.from_config(
            config,
            cwd=project_dir,
            version_new=version,
            dry_run=dry_run,
        )
        if release_date is not None:
            context.release_date = release_date.date()

        if dry_run:
            click.echo(f"📝 Releasing {version} (DRY RUN - no files will be modified)...")
        else:
            click.echo(f"📝 Releasing {version}...")

        stats = run_release(context, logger)
    except ReleaseError as e:
        if not e.fatal:
            click.echo(str(e), err=True)
            ctx.exit(1)
        handle_cli_error(ctx, e, "release", additional_context={"cwd": cwd, "version": version})
    except Exception as e:
        handle_cli_error(ctx, e, "release", additional_context={"cwd": cwd, "version": version})

    for warning in context.warnings:
        click.echo(f"⚠️  {warning}", err=True)

    if dry_run:
        for path, text in context.rendered.items():
            click.echo(f"\n----- {path.name} -----")
            click.echo(text)
        click.echo("\n💡 Run without --dry-run to write the files")
        return

    click.echo("\n✅ Release complete:")
    for path in stats.written_paths:
        click.echo(f"  Updated: {path.name}")
    if stats.entries_moved:
        click.echo(f"  Entries archived: {stats.entries_moved}")
    click.echo(f"  Duration: {stats.duration():.2f}s")


if __name__ == "__main__":
    cli()
