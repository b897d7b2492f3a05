#!/usr/bin/env python3
"""
changelog.py
------------
Validation of parsed changelog documents before a release.

Checks on the primary document (current changelog):
- the placeholder entry exists
- there is exactly one placeholder entry
- the placeholder entry has content

Checks on the archive document:
- no placeholder entry slipped into it

Every check runs independently and reports a plain message; nothing raises.
The caller accumulates the messages so a user sees all problems of a run at
once.

Usage:
    from relnotes.validators.changelog import validate_primary

    errors = validate_primary(document)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import List, Optional

# --- Local imports ---
from relnotes.dataclasses.changelog_document import ChangelogDocument
from relnotes.dataclasses.changelog_entry import PLACEHOLDER_MARKER, ChangelogEntry


@dataclass
class ClassifiedEntries:
    """
    Entries of a document sorted by kind.

    Attributes:
        placeholders: Entries whose title starts with the sentinel
        released: All other entries, in document order
    """

    placeholders: List[ChangelogEntry] = field(default_factory=list)
    released: List[ChangelogEntry] = field(default_factory=list)

    @property
    def placeholder(self) -> Optional[ChangelogEntry]:
        """The placeholder, when there is exactly one."""
        return self.placeholders[0] if len(self.placeholders) == 1 else None


def classify_entries(entries: List[ChangelogEntry]) -> ClassifiedEntries:
    """Split entries into placeholders and released entries."""
    result = ClassifiedEntries()
    for entry in entries:
        if entry.is_placeholder:
            result.placeholders.append(entry)
        else:
            result.released.append(entry)
    return result


def validate_primary(document: ChangelogDocument) -> List[str]:
    """
    Validate the current changelog.

    Args:
        document: Parsed primary document

    Returns:
        Error messages (empty when the document is ready for release)
    """
    filename = document.path.name
    classified = classify_entries(document.entries)
    errors: List[str] = []

    if not classified.placeholders:
        errors.append(
            f"The changelog placeholder is missing from {filename}! "
            f"Add a section titled '{document.entry_prefix}{PLACEHOLDER_MARKER}'."
        )

    if len(classified.placeholders) > 1:
        errors.append(
            f"There is more than one changelog placeholder in {filename}!"
        )

    if len(classified.placeholders) == 1 and not classified.placeholder.has_content:
        errors.append(
            f"The changelog for the next version in {filename} is empty!"
        )

    return errors


def validate_archive(document: ChangelogDocument) -> List[str]:
    """Validate the archive of older entries."""
    if classify_entries(document.entries).placeholders:
        return [f"The changelog placeholder must not be in {document.path.name}!"]
    return []
