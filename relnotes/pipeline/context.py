#!/usr/bin/env python3
"""
context.py
-------------------
Execution context shared by the check and edit stages of a release run.

One ReleaseContext is created per run. The caller fills in the inputs
(project directory, version, date, retention count, dry-run flag); the
check stage publishes the parsed documents; the edit stage reads them back,
so anything a caller changes in between is honoured.

Inputs:
    cwd, version_new, release_date, num_changelog_entries, dry_run

Published by the check stage:
    primary, archive, changelog_new, errors, warnings

Published by the edit stage:
    rendered (path -> final text, filled even under dry-run)

Read-only views named after the keys downstream tooling expects
(changelog_filename, changelog_before, changelog_entries, ...) are exposed
as properties.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

# --- Local imports ---
from relnotes.core.config import ReleaseConfig
from relnotes.core.paths import DEFAULT_ARCHIVE_HEADER
from relnotes.core.validators import DataValidator
from relnotes.dataclasses.changelog_document import ChangelogDocument


@dataclass
class ReleaseContext:
    """
    State of one release run.

    Attributes:
        cwd: Project directory holding the changelog files
        version_new: Version being released (surrounding whitespace dropped)
        release_date: Release date; accepts ISO strings, today when not given
        num_changelog_entries: Retention count, None to keep everything
        dry_run: Compute everything but write nothing
        archive_header: Header for a newly created archive document
        primary: Current changelog, set by the check stage
        archive: Archive of older entries, if the file exists
        changelog_new: Body of the placeholder entry (release notes)
        errors: Accumulated validation errors
        warnings: Non-blocking findings
        rendered: Final text per document path, set by the edit stage
    """

    cwd: Path = field(default_factory=Path.cwd)
    version_new: Optional[str] = None
    release_date: date = field(default_factory=date.today)
    num_changelog_entries: Optional[int] = None
    dry_run: bool = False
    archive_header: str = DEFAULT_ARCHIVE_HEADER

    primary: Optional[ChangelogDocument] = None
    archive: Optional[ChangelogDocument] = None
    changelog_new: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    rendered: Dict[Path, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.cwd = Path(self.cwd)
        self.version_new = DataValidator.normalize_string(self.version_new)
        self.release_date = DataValidator.normalize_date(self.release_date) or date.today()

    @classmethod
    def from_config(cls, config: ReleaseConfig, **kwargs) -> ReleaseContext:
        """Create a context whose retention and archive header come from config."""
        kwargs.setdefault("num_changelog_entries", config.num_changelog_entries)
        kwargs.setdefault("archive_header", config.archive_header)
        return cls(**kwargs)

    # ---- Errors ----
    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    # ---- Primary document views ----
    @property
    def changelog_filename(self) -> Optional[str]:
        return self.primary.path.name if self.primary else None

    @property
    def changelog_location(self) -> Optional[str]:
        """'changelog' for CHANGELOG.md, 'readme' for a README section."""
        return self.primary.role.value if self.primary else None

    @property
    def changelog_entry_prefix(self) -> Optional[str]:
        return self.primary.layout.entry_marker if self.primary else None

    @property
    def changelog_before(self) -> str:
        return self.primary.header if self.primary else ""

    @property
    def changelog_after(self) -> str:
        return self.primary.footer if self.primary else ""

    @property
    def changelog_entries(self) -> List[str]:
        return self.primary.raw_entries if self.primary else []

    # ---- Archive document views ----
    @property
    def changelog_old_before(self) -> Optional[str]:
        return self.archive.header if self.archive else None

    @property
    def changelog_old_after(self) -> Optional[str]:
        return self.archive.footer if self.archive else None

    @property
    def changelog_old_entries(self) -> List[str]:
        return self.archive.raw_entries if self.archive else []

    @property
    def combined_entries(self) -> List[str]:
        """Primary entries followed by archive entries, as raw text."""
        return self.changelog_entries + self.changelog_old_entries
