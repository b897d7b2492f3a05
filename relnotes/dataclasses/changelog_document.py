#!/usr/bin/env python3
"""
changelog_document.py
---------------------

Defines the changelog document model:

- DocumentRole: which part a file plays in a release (standalone changelog,
  changelog section embedded in a broader document, or archive)
- DocumentLayout: where a document lives and which heading marker delimits
  its entries, fixed once per role
- ChangelogDocument: a parsed document (header, entries, footer)

Documents are rebuilt from disk on every run. The primary document (current
changelog) and the archive (older entries) are related only by entries
migrating between them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from relnotes.core.paths import (
    ARCHIVE_ENTRY_MARKER,
    CHANGELOG_FILENAME,
    CHANGELOG_OLD_FILENAME,
    EMBEDDED_ENTRY_MARKER,
    README_FILENAME,
    README_SECTION_HEADING,
    STANDALONE_ENTRY_MARKER,
)
from relnotes.dataclasses.changelog_entry import ChangelogEntry
from relnotes.pipeline.parser import parse_document
from relnotes.pipeline.serializer import serialize_document


class DocumentRole(Enum):
    """Part a Markdown file plays in a release."""

    STANDALONE = "changelog"
    EMBEDDED_SECTION = "readme"
    ARCHIVE = "archive"

    @property
    def is_primary(self) -> bool:
        return self is not DocumentRole.ARCHIVE


@dataclass(frozen=True)
class DocumentLayout:
    """
    Location and entry delimiter of one candidate document.

    Attributes:
        role: Part the document plays
        filename: File name relative to the project directory
        entry_marker: Heading marker of entries ('##' or '###')
        section_heading: For embedded changelogs, the exact heading line that
            opens the changelog section (e.g. '## Changelog')
    """

    role: DocumentRole
    filename: str
    entry_marker: str
    section_heading: Optional[str] = None

    @property
    def entry_prefix(self) -> str:
        """Literal prefix of entry heading lines: marker plus one space."""
        return f"{self.entry_marker} "


STANDALONE_LAYOUT = DocumentLayout(
    DocumentRole.STANDALONE, CHANGELOG_FILENAME, STANDALONE_ENTRY_MARKER
)
EMBEDDED_LAYOUT = DocumentLayout(
    DocumentRole.EMBEDDED_SECTION,
    README_FILENAME,
    EMBEDDED_ENTRY_MARKER,
    section_heading=README_SECTION_HEADING,
)
ARCHIVE_LAYOUT = DocumentLayout(
    DocumentRole.ARCHIVE, CHANGELOG_OLD_FILENAME, ARCHIVE_ENTRY_MARKER
)

PRIMARY_LAYOUTS = (STANDALONE_LAYOUT, EMBEDDED_LAYOUT)
"""Primary candidates, in order of preference."""


@dataclass
class ChangelogDocument:
    """
    A parsed changelog document.

    Attributes:
        path (Path): File the document was read from (or will be written to).
        layout (DocumentLayout): Role and entry delimiter.
        header (str): Verbatim text before the first entry.
        entries (List[ChangelogEntry]): Entries, newest first.
        footer (str): Text after the last entry span.
        folded_headings (List[str]): Higher-level headings found between
            entries and kept inside the entry before them.
    """

    path: Path
    layout: DocumentLayout
    header: str = ""
    entries: List[ChangelogEntry] = field(default_factory=list)
    footer: str = ""
    folded_headings: List[str] = field(default_factory=list)

    # ---- Public constructors ----
    @classmethod
    def from_text(cls, path: Path, layout: DocumentLayout, text: str) -> ChangelogDocument:
        """Parse raw document text according to its layout."""
        parsed = parse_document(text, layout.entry_marker, layout.section_heading)
        return cls(
            path=Path(path),
            layout=layout,
            header=parsed.header,
            entries=[ChangelogEntry.from_text(raw) for raw in parsed.entries],
            footer=parsed.footer,
            folded_headings=parsed.folded_headings,
        )

    @classmethod
    def from_file(cls, path: Path, layout: DocumentLayout) -> ChangelogDocument:
        """Read and parse a UTF-8 document from disk."""
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_text(path, layout, text)

    # ---- Accessors ----
    @property
    def role(self) -> DocumentRole:
        return self.layout.role

    @property
    def entry_prefix(self) -> str:
        return self.layout.entry_prefix

    @property
    def raw_entries(self) -> List[str]:
        return [entry.text for entry in self.entries]

    @property
    def placeholders(self) -> List[ChangelogEntry]:
        return [entry for entry in self.entries if entry.is_placeholder]

    # ---- Rendering ----
    def to_text(self) -> str:
        """Serialize with normalized blank lines."""
        return serialize_document(self.header, self.raw_entries, self.footer)

    def with_entries(self, entries: List[ChangelogEntry]) -> ChangelogDocument:
        """Copy of this document holding another entry list."""
        return replace(self, entries=list(entries))
