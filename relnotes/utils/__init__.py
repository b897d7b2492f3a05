"""
Utilities package for relnotes.

- md: Markdown heading detection, heading depth shifting, blank-line handling

Import commonly-used utilities directly from this package:
    from relnotes.utils import heading_level, collapse_blank_lines
"""

from .md import (
    HEADING_CHAR,
    heading_level,
    heading_marker,
    heading_title,
    shift_heading,
    is_blank,
    strip_leading_blank_lines,
    collapse_blank_lines,
)

__all__ = [
    "HEADING_CHAR",
    "heading_level",
    "heading_marker",
    "heading_title",
    "shift_heading",
    "is_blank",
    "strip_leading_blank_lines",
    "collapse_blank_lines",
]
