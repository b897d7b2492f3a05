#!/usr/bin/env python3
"""
changelog_entry.py
-------------------

Defines the ChangelogEntry dataclass: one release section of a changelog,
from its heading line up to (excluding) the next heading at the same level.

Each ChangelogEntry instance contains:
- the raw heading line (no line break)
- the raw body (everything after the heading line, verbatim)

and derives from the heading:
- whether it is the placeholder for unreleased changes
- the released version and release date, when the title carries them

Bodies are opaque: they are moved between documents as a whole and never
inspected beyond an emptiness check.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, replace
from typing import Optional

# --- Local imports ---
from relnotes.utils.md import heading_level, heading_marker, heading_title, shift_heading


# ----- Constants -----
PLACEHOLDER_MARKER = "**WORK IN PROGRESS**"
PLACEHOLDER_MARKERS = (PLACEHOLDER_MARKER, "__WORK IN PROGRESS__")
"""
Sentinel titles marking the unreleased-changes entry.

The bold form is canonical; the underscore form renders identically in
Markdown and is accepted too.
"""

_RELEASED_TITLE_RE = re.compile(
    r"^v?(?P<version>\d+(?:\.\d+)*(?:[-+][0-9A-Za-z.+-]+)?)"
    r"(?:\s+\((?P<date>\d{4}-\d{2}-\d{2})\))?"
)


# ----- Dataclass -----
@dataclass(frozen=True)
class ChangelogEntry:
    """
    A single changelog entry.

    Attributes:
        raw_heading (str): Heading line, e.g. "## 1.2.3 (2024-01-15) · Name".
        raw_body (str): Text after the heading line, without trailing blank lines.
    """

    raw_heading: str
    raw_body: str = ""

    # ---- Public constructors ----
    @classmethod
    def from_text(cls, text: str) -> ChangelogEntry:
        """
        Split a raw entry block into heading and body.

        Examples:
            >>> entry = ChangelogEntry.from_text("## 1.2.3 Other release\\n* Did something")
            >>> entry.raw_body
            '* Did something'
        """
        heading, _, body = text.partition("\n")
        return cls(raw_heading=heading.rstrip("\r"), raw_body=body.rstrip())

    # ---- Rendering ----
    @property
    def text(self) -> str:
        """Entry as it appears in a document (heading, then body)."""
        if not self.raw_body:
            return self.raw_heading
        return f"{self.raw_heading}\n{self.raw_body}"

    def __str__(self) -> str:
        return self.text

    # ---- Heading ----
    @property
    def marker(self) -> str:
        """Heading marker, e.g. '##'; empty if the heading is malformed."""
        return heading_marker(self.raw_heading) or ""

    @property
    def level(self) -> int:
        return heading_level(self.raw_heading)

    @property
    def title(self) -> str:
        """Heading text after the marker."""
        return heading_title(self.raw_heading)

    # ---- Placeholder ----
    @property
    def placeholder_marker(self) -> Optional[str]:
        """
        The sentinel forming this entry's title, if any.

        The sentinel must be the whole title or be followed by whitespace;
        "**WORK IN PROGRESS**2" is not a placeholder.
        """
        title = self.title
        for sentinel in PLACEHOLDER_MARKERS:
            if title.startswith(sentinel):
                rest = title[len(sentinel):]
                if not rest or rest[0].isspace():
                    return sentinel
        return None

    @property
    def is_placeholder(self) -> bool:
        return self.placeholder_marker is not None

    @property
    def title_suffix(self) -> str:
        """
        Free text following the sentinel of a placeholder title.

        For "**WORK IN PROGRESS** · Doomsday release" this is
        " · Doomsday release" (leading separator included). Empty for
        non-placeholder entries.
        """
        sentinel = self.placeholder_marker
        if sentinel is None:
            return ""
        return self.title[len(sentinel):]

    @property
    def has_content(self) -> bool:
        """True when the body holds anything besides whitespace."""
        return bool(self.raw_body.strip())

    # ---- Released entries ----
    @property
    def version(self) -> Optional[str]:
        """Version a released entry documents ('1.2.3'); None otherwise."""
        if self.is_placeholder:
            return None
        match = _RELEASED_TITLE_RE.match(self.title)
        return match.group("version") if match else None

    @property
    def release_date(self) -> Optional[str]:
        """ISO release date from '<version> (<YYYY-MM-DD>)' titles; None otherwise."""
        if self.is_placeholder:
            return None
        match = _RELEASED_TITLE_RE.match(self.title)
        return match.group("date") if match else None

    # ---- Transforms ----
    def with_heading(self, heading: str) -> ChangelogEntry:
        """Copy of this entry with another heading and the same body."""
        return replace(self, raw_heading=heading)

    def shifted(self, levels: int = 1) -> ChangelogEntry:
        """Copy with the heading made `levels` shallower; body untouched."""
        return self.with_heading(shift_heading(self.raw_heading, levels))
