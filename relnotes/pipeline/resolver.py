#!/usr/bin/env python3
"""
resolver.py
-------------------
Turn the placeholder entry into a released entry.

    ## **WORK IN PROGRESS** · Doomsday release
becomes
    ## 2.3.4 (2024-01-15) · Doomsday release

Only the sentinel is replaced; the heading marker, whatever follows the
sentinel and the whole body are carried over untouched.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import List, Optional, Tuple

# --- Local imports ---
from relnotes.dataclasses.changelog_entry import ChangelogEntry


def format_release_heading(marker: str, version: str, release_date: date, suffix: str = "") -> str:
    """
    Build a released heading line.

    Examples:
        >>> format_release_heading("##", "2.3.4", date(2024, 1, 15), " · Doomsday release")
        '## 2.3.4 (2024-01-15) · Doomsday release'
    """
    return f"{marker} {version} ({release_date.isoformat()}){suffix}"


def resolve_placeholder(entry: ChangelogEntry, version: str, release_date: date) -> ChangelogEntry:
    """
    Resolve a placeholder entry into a released entry.

    Args:
        entry: The placeholder entry
        version: Version being released (used verbatim)
        release_date: Release date, written in ISO format

    Returns:
        New ChangelogEntry with the rewritten heading and the same body

    Raises:
        ValueError: If the entry is not a placeholder
    """
    if not entry.is_placeholder:
        raise ValueError(f"Not a changelog placeholder: {entry.raw_heading!r}")

    heading = format_release_heading(entry.marker, version, release_date, entry.title_suffix)
    return entry.with_heading(heading)


def resolve_in_entries(
    entries: List[ChangelogEntry], version: str, release_date: date
) -> Tuple[List[ChangelogEntry], Optional[int]]:
    """
    Resolve the first placeholder of an entry list.

    Returns:
        (new entry list, index of the resolved entry or None if there was
        no placeholder). The input list is not modified.
    """
    resolved = list(entries)
    for index, entry in enumerate(resolved):
        if entry.is_placeholder:
            resolved[index] = resolve_placeholder(entry, version, release_date)
            return resolved, index
    return resolved, None
