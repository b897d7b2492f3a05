#!/usr/bin/env python3
"""
paths.py
-------------------
Path and filename constants for the relnotes project.

The engine always works relative to a project directory (the current
working directory by default) that holds some of these files:

    <project>/
    ├── CHANGELOG.md       # Standalone changelog, entries at "## "
    ├── README.md          # Changelog as "## Changelog" section, entries at "### "
    ├── CHANGELOG_OLD.md   # Archive of older entries, entries at "## "
    └── .relnotes.yml      # Optional configuration

Logs are kept outside the project, in the user's cache directory, unless
RELNOTES_LOG_DIR points somewhere else.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


# ----- Candidate documents -----
CHANGELOG_FILENAME = "CHANGELOG.md"
README_FILENAME = "README.md"
CHANGELOG_OLD_FILENAME = "CHANGELOG_OLD.md"

# ---- Heading markers ----
STANDALONE_ENTRY_MARKER = "##"
EMBEDDED_ENTRY_MARKER = "###"
ARCHIVE_ENTRY_MARKER = "##"
README_SECTION_HEADING = "## Changelog"

# Header written to a freshly created archive document
DEFAULT_ARCHIVE_HEADER = "# Changelog (older changes)\n"

# ---- Configuration ----
CONFIG_FILENAME = ".relnotes.yml"

# ---- Logs ----
LOG_DIR = Path(
    os.environ.get("RELNOTES_LOG_DIR", Path.home() / ".cache" / "relnotes" / "logs")
)
