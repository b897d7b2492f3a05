#!/usr/bin/env python3
"""
serializer.py
-------------------
Reassemble a changelog document from header, entries and footer.

Layout of the output:

    <header>            (line break appended if missing)
    <entry 1>
    <blank line>
    <entry 2>
    ...
    <blank line>        (only when the footer is non-empty)
    <footer>

Blank lines are normalized at the seams only: runs of blank lines inside
the header or footer, between the header and the first entry, between
entries and before the footer collapse into a single blank line, so
documents written by relnotes never accumulate vertical whitespace across
releases. Entry bodies are opaque and keep their inner blank lines (code
blocks, deliberate spacing); only blank lines trailing an entry are dropped.

Programmatic API:
    from relnotes.pipeline.serializer import serialize_document
    text = serialize_document("# Changelog\\n", ["## 1.0.0\\n* x"], "")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Iterable

# --- Local imports ---
from relnotes.utils.md import collapse_blank_lines, strip_leading_blank_lines


ENTRY_SEPARATOR = "\n\n"


def _trim_entry(entry: str) -> str:
    """Drop blank lines around an entry block, leaving its inside alone."""
    return strip_leading_blank_lines(entry).rstrip()


def serialize_document(header: str, entries: Iterable[str], footer: str) -> str:
    """
    Serialize a document with normalized blank lines.

    Args:
        header: Text before the first entry
        entries: Raw entry texts in output order
        footer: Trailing text (may be empty)

    Returns:
        Final document text

    Examples:
        >>> serialize_document("H\\n\\n\\n", ["X", "Y"], "\\n\\n\\nF")
        'H\\n\\nX\\n\\nY\\n\\nF'
    """
    text = collapse_blank_lines(header)
    body = ENTRY_SEPARATOR.join(_trim_entry(entry) for entry in entries)

    if body:
        if text and not text.endswith("\n"):
            text += "\n"
        text += body

    if footer.strip():
        tail = collapse_blank_lines(strip_leading_blank_lines(footer))
        if text:
            text = text.rstrip() + ENTRY_SEPARATOR
        text += tail

    return text
