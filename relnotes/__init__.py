"""
relnotes
========

Changelog maintenance for releases.

Keeps a human-edited Markdown changelog ready for release: the section
titled "**WORK IN PROGRESS**" collects notes for the next version and, at
release time, becomes a dated entry for that version. Optionally only the
newest entries stay in the current changelog while older ones move to
CHANGELOG_OLD.md.

Main Components:
    - pipeline: check/edit stages, parser, resolver, retention, serializer
    - validators: placeholder checks
    - dataclasses: ChangelogEntry, ChangelogDocument, document roles
    - core: logging, configuration, exceptions, paths, CLI helpers
    - utils: Markdown heading helpers

Primary Interfaces:
    - relnotes.pipeline.cli: Command-line interface (`relnotes`)
    - relnotes.pipeline.changelog.run_release: Programmatic release run

Example Usage:
    >>> from pathlib import Path
    >>> from relnotes import ReleaseContext, run_release
    >>> context = ReleaseContext(cwd=Path("."), version_new="2.3.4", num_changelog_entries=5)
    >>> stats = run_release(context)
"""

__version__ = "1.0.0"

from relnotes.pipeline.context import ReleaseContext
from relnotes.pipeline.changelog import check_stage, edit_stage, run_release

__all__ = [
    "ReleaseContext",
    "check_stage",
    "edit_stage",
    "run_release",
]
