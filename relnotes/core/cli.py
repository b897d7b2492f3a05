#!/usr/bin/env python3
"""
cli.py
------
Shared helpers for the relnotes commands.

    setup_logger   → RelnotesLogger writing to <log_dir>/operations/
    ReleaseStats   → what a release run did, with a one-line summary

Usage:
    from relnotes.core.cli import setup_logger, ReleaseStats

    logger = setup_logger(LOG_DIR, "release")
    stats = edit_stage(context, logger)
    click.echo(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

# --- Local imports ---
from relnotes.core.logging_manager import RelnotesLogger


def setup_logger(log_dir: Path, component_name: str) -> RelnotesLogger:
    """
    Create the logger of a CLI invocation.

    Args:
        log_dir: Base log directory (paths.LOG_DIR unless --log-dir is given)
        component_name: Log file stem, e.g. 'release' for release.log

    Returns:
        RelnotesLogger rooted at <log_dir>/operations
    """
    return RelnotesLogger(Path(log_dir) / "operations", component_name=component_name)


@dataclass
class ReleaseStats:
    """
    Outcome of one edit stage.

    Attributes:
        files_processed: Documents rendered
        files_written: Documents written to disk (0 under dry-run)
        entries_moved: Entries relocated from the current changelog to the archive
        written_paths: Documents written, or that would be under dry-run
        errors: Write failures
        dry_run: Whether writing was skipped
    """

    files_processed: int = 0
    files_written: int = 0
    entries_moved: int = 0
    written_paths: List[Path] = field(default_factory=list)
    errors: int = 0
    dry_run: bool = False
    started: float = field(default_factory=time.perf_counter, repr=False)

    def duration(self) -> float:
        """Seconds since the stats object was created."""
        return time.perf_counter() - self.started

    def summary(self) -> str:
        verb = "would write" if self.dry_run else "wrote"
        return (
            f"{verb} {len(self.written_paths)} files, "
            f"{self.entries_moved} entries archived, "
            f"{self.duration():.2f}s"
        )
