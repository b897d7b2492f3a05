#!/usr/bin/env python3
"""
parser.py
-------------------
Split a changelog document into header, entries and footer.

Entries are delimited by lines that begin exactly with an entry prefix
(the heading marker plus one space, e.g. "## "). No Markdown grammar is
involved: a single pass over the lines drives a small state machine.

    SEEKING_SECTION ──(section heading)──> OUTSIDE_ENTRY      (embedded only)
    OUTSIDE_ENTRY   ──(prefix line)──────> INSIDE_ENTRY
    INSIDE_ENTRY    ──(prefix line)──────> INSIDE_ENTRY       (next entry)
    INSIDE_ENTRY    ──(higher heading)───> FOOTER
    FOOTER          ──(prefix line)──────> INSIDE_ENTRY       (footer folded back)
    INSIDE_ENTRY    ──(section heading level)> SECTION_CLOSED (embedded only, final)

- Header: verbatim text before the first entry, trailing line break kept.
- Entries: verbatim heading-to-next-heading blocks, trailing whitespace
  trimmed.
- Footer: text from the first heading of a higher level (fewer markers)
  following the last entry, leading blank lines trimmed.

Headings of a deeper level, or lines with other markers, never split: they
stay inside the entry they appear in. A higher-level heading followed later
by another entry is ambiguous; it is kept in the body of the entry before
it and a warning is logged.

For an embedded changelog the section ends for good at the next heading
of the section's level or higher: everything from there on is footer, and
entry-prefixed lines in later sections are never taken as entries.

Programmatic API:
    from relnotes.pipeline.parser import parse_document
    parsed = parse_document(text, "##")
    parsed = parse_document(readme_text, "###", section_heading="## Changelog")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

# --- Local imports ---
from relnotes.core.exceptions import ChangelogParseError
from relnotes.utils.md import HEADING_CHAR, heading_level, strip_leading_blank_lines


logger = logging.getLogger(__name__)


@dataclass
class ParsedDocument:
    """
    Raw parse result.

    Attributes:
        header: Text before the first entry (whole text if there are none)
        entries: Raw entry blocks in document order
        footer: Trailing text after the last entry span
        folded_headings: Higher-level heading lines that were kept inside an
            entry because another entry followed them
    """

    header: str = ""
    entries: List[str] = field(default_factory=list)
    footer: str = ""
    folded_headings: List[str] = field(default_factory=list)


class _State(Enum):
    SEEKING_SECTION = auto()
    OUTSIDE_ENTRY = auto()
    INSIDE_ENTRY = auto()
    FOOTER = auto()
    SECTION_CLOSED = auto()


def _validate_marker(entry_marker: str) -> int:
    if not entry_marker or entry_marker.strip(HEADING_CHAR):
        raise ChangelogParseError(
            f"Entry marker must be one or more '{HEADING_CHAR}': {entry_marker!r}"
        )
    return len(entry_marker)


def parse_document(
    text: str,
    entry_marker: str,
    section_heading: Optional[str] = None,
) -> ParsedDocument:
    """
    Parse a changelog document.

    Args:
        text: Raw document text
        entry_marker: Heading marker delimiting entries ('##', '###', ...)
        section_heading: For changelogs embedded in a broader document, the
            exact heading line opening the changelog section. Entries are
            only searched after it, and the section ends at the next heading
            of the same or a higher level.

    Returns:
        ParsedDocument. Zero entries means "no changelog content": the whole
        text is then the header and the footer is empty.

    Raises:
        ChangelogParseError: If entry_marker is not a run of '#'
    """
    entry_level = _validate_marker(entry_marker)
    prefix = f"{entry_marker} "
    section_level = heading_level(section_heading) if section_heading else 0

    state = _State.SEEKING_SECTION if section_heading else _State.OUTSIDE_ENTRY
    header: List[str] = []
    blocks: List[List[str]] = []
    footer: List[str] = []
    folded: List[str] = []

    for line in text.splitlines(keepends=True):
        is_entry_start = line.startswith(prefix)
        level = heading_level(line)

        if state is _State.SEEKING_SECTION:
            header.append(line)
            if line.rstrip("\r\n") == section_heading:
                state = _State.OUTSIDE_ENTRY

        elif state is _State.OUTSIDE_ENTRY:
            if is_entry_start:
                blocks.append([line])
                state = _State.INSIDE_ENTRY
            else:
                header.append(line)
                if section_level and 0 < level <= section_level:
                    # Section closed before any entry; stop looking
                    state = _State.SEEKING_SECTION
                    section_heading = None

        elif state is _State.INSIDE_ENTRY:
            if is_entry_start:
                blocks.append([line])
            elif section_level and 0 < level <= section_level:
                footer.append(line)
                state = _State.SECTION_CLOSED
            elif 0 < level < entry_level:
                footer.append(line)
                state = _State.FOOTER
            else:
                blocks[-1].append(line)

        elif state is _State.SECTION_CLOSED:
            footer.append(line)

        else:  # FOOTER
            if is_entry_start:
                folded.append(footer[0].rstrip("\r\n"))
                logger.warning(
                    "Heading %r appears between changelog entries; "
                    "keeping it in the body of the entry before it",
                    folded[-1],
                )
                blocks[-1].extend(footer)
                footer = []
                blocks.append([line])
                state = _State.INSIDE_ENTRY
            else:
                footer.append(line)

    if not blocks:
        return ParsedDocument(header=text)

    return ParsedDocument(
        header="".join(header),
        entries=["".join(block).rstrip() for block in blocks],
        footer=strip_leading_blank_lines("".join(footer)),
        folded_headings=folded,
    )
