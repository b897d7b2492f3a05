#!/usr/bin/env python3
"""
cli_options.py
-------------------
Click options shared by the relnotes commands.

Usage:
    from relnotes.core.cli_options import cwd_option, dry_run_option

    @cli.command()
    @cwd_option
    @dry_run_option
    def release(cwd: str, dry_run: bool) -> None:
        ...
"""
import click


# ----- Project -----
cwd_option = click.option(
    "-C", "--cwd",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    show_default=True,
    help="Project directory containing the changelog files",
)

dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Print the resulting documents instead of writing them",
)


# ----- Release -----
num_entries_option = click.option(
    "-n", "--num-entries", "num_changelog_entries",
    type=click.IntRange(min=1),
    default=None,
    help="Entries to keep in the current changelog; older ones move to CHANGELOG_OLD.md",
)

release_date_option = click.option(
    "--date", "release_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Release date (YYYY-MM-DD, default: today)",
)
