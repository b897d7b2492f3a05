#!/usr/bin/env python3
"""
retention.py
-------------------
Keep the current changelog short by moving older entries to the archive.

Given the entries of the primary document (newest first) and those of the
archive, a retention count N keeps the first N entries in the primary
document and prepends the rest, in order, to the archive:

    primary [A, B, C], archive [D, E], N = 2
        -> primary [A, B], archive [C, D, E]

Entries leaving a changelog nested one level deeper than the archive (a
README section using '###') lose one heading level on the way. Nothing else
in the entry changes.

Pure functions only: no I/O happens here.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

# --- Local imports ---
from relnotes.core.paths import ARCHIVE_ENTRY_MARKER
from relnotes.dataclasses.changelog_entry import ChangelogEntry


@dataclass(frozen=True)
class RedistributionResult:
    """
    Outcome of a retention pass.

    Attributes:
        primary: Entries remaining in the primary document
        archive: Full archive entry list (moved entries first)
        moved: Entries that left the primary document, already reprefixed
    """

    primary: List[ChangelogEntry] = field(default_factory=list)
    archive: List[ChangelogEntry] = field(default_factory=list)
    moved: List[ChangelogEntry] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.moved)


def reprefix_for_archive(
    entry: ChangelogEntry, archive_marker: str = ARCHIVE_ENTRY_MARKER
) -> ChangelogEntry:
    """
    Adapt an entry heading to the archive's entry level.

    Entries one level deeper than the archive lose exactly one marker
    character. Entries already at the archive level are returned as is.
    """
    if entry.level > len(archive_marker):
        return entry.shifted(1)
    return entry


def redistribute_entries(
    primary: Sequence[ChangelogEntry],
    archive: Sequence[ChangelogEntry],
    retention: Optional[int],
    archive_marker: str = ARCHIVE_ENTRY_MARKER,
) -> RedistributionResult:
    """
    Partition entries between the primary document and the archive.

    Args:
        primary: Primary entries, newest first (placeholder already resolved)
        archive: Current archive entries
        retention: Entries to keep in the primary document; None disables
            retention
        archive_marker: Heading marker of archive entries

    Returns:
        RedistributionResult. When retention is None or not exceeded both
        lists come back unchanged and nothing is moved.

    Raises:
        ValueError: If retention is smaller than 1
    """
    if retention is not None and retention < 1:
        raise ValueError(f"Retention count must be at least 1, got {retention}")

    if retention is None or len(primary) <= retention:
        return RedistributionResult(primary=list(primary), archive=list(archive))

    kept = list(primary[:retention])
    moved = [reprefix_for_archive(entry, archive_marker) for entry in primary[retention:]]
    return RedistributionResult(primary=kept, archive=moved + list(archive), moved=moved)
