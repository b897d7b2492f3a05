#!/usr/bin/env python3
"""
md.py
-------------------
Markdown heading and whitespace utilities.

Changelog documents are never parsed as full Markdown. Only ATX heading
lines matter (a run of '#' followed by a space), plus blank-line hygiene
when documents are written back. Everything here works on plain strings.

Intended for use by the document parser, the serializer and the
ChangelogEntry dataclass.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Optional


HEADING_CHAR = "#"

_HEADING_RE = re.compile(r"^(#+) ")
_BLANK_RUN_RE = re.compile(r"\n(?:[ \t]*\n){2,}")


# ----- Headings -----
def heading_level(line: str) -> int:
    """
    Return the ATX heading level of a line, or 0 if it is not a heading.

    Only a run of '#' at column 0 followed by a space counts.

    Examples:
        >>> heading_level("## 1.2.3 Release")
        2
        >>> heading_level("##no-space")
        0
        >>> heading_level("  ## indented")
        0
    """
    match = _HEADING_RE.match(line)
    return len(match.group(1)) if match else 0


def heading_marker(line: str) -> Optional[str]:
    """
    Return the '#' run of a heading line ("##" for "## Title"), else None.
    """
    match = _HEADING_RE.match(line)
    return match.group(1) if match else None


def heading_title(line: str) -> str:
    """
    Return the text after the heading marker and its single space.

    Non-heading lines are returned unchanged (minus the line break).

    Examples:
        >>> heading_title("## **WORK IN PROGRESS** · Doomsday release")
        '**WORK IN PROGRESS** · Doomsday release'
    """
    line = line.rstrip("\r\n")
    match = _HEADING_RE.match(line)
    return line[match.end():] if match else line


def shift_heading(line: str, levels: int = 1) -> str:
    """
    Make a heading shallower by removing `levels` marker characters.

    All other characters of the line are preserved verbatim. A heading
    never drops below level 1; non-headings are returned unchanged.

    Examples:
        >>> shift_heading("### 1.2.0 Other release")
        '## 1.2.0 Other release'
    """
    level = heading_level(line)
    if level == 0:
        return line
    removed = min(levels, level - 1)
    return line[removed:]


# ----- Blank lines -----
def is_blank(line: str) -> bool:
    """True for empty or whitespace-only lines."""
    return not line.strip()


def strip_leading_blank_lines(text: str) -> str:
    """
    Remove the run of blank lines at the start of a text.

    Leading whitespace on the first non-blank line is preserved.
    """
    lines = text.splitlines(keepends=True)
    index = 0
    while index < len(lines) and is_blank(lines[index]):
        index += 1
    return "".join(lines[index:])


def collapse_blank_lines(text: str) -> str:
    """
    Collapse every run of two or more blank lines into one blank line.

    Examples:
        >>> collapse_blank_lines("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """
    return _BLANK_RUN_RE.sub("\n\n", text)
