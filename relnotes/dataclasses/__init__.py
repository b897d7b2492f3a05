"""
dataclasses package
-------------------
Dataclass definitions for changelog documents.

- ChangelogEntry: one release section (heading + opaque body)
- ChangelogDocument: header, entries and footer of one Markdown file
- DocumentRole / DocumentLayout: which file plays which part, and the
  heading marker delimiting its entries
"""
from relnotes.dataclasses.changelog_entry import ChangelogEntry, PLACEHOLDER_MARKER
from relnotes.dataclasses.changelog_document import (
    ARCHIVE_LAYOUT,
    EMBEDDED_LAYOUT,
    PRIMARY_LAYOUTS,
    STANDALONE_LAYOUT,
    ChangelogDocument,
    DocumentLayout,
    DocumentRole,
)

__all__ = [
    "ChangelogEntry",
    "PLACEHOLDER_MARKER",
    "ChangelogDocument",
    "DocumentLayout",
    "DocumentRole",
    "STANDALONE_LAYOUT",
    "EMBEDDED_LAYOUT",
    "ARCHIVE_LAYOUT",
    "PRIMARY_LAYOUTS",
]
