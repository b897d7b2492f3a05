#!/usr/bin/env python3
"""
changelog.py
-------------------
The two stages of a release run.

    check  → find and parse CHANGELOG.md / README.md and CHANGELOG_OLD.md,
             validate the placeholder, publish everything to the context
    edit   → resolve the placeholder with the new version and date, move
             entries beyond the retention count to the archive, write files

Between the stages the context is the only shared state; the edit stage
works on whatever the context holds at that point.

    <project>/
    ├── CHANGELOG.md        # preferred primary document ("## " entries)
    ├── README.md           # fallback: "## Changelog" section ("### " entries)
    └── CHANGELOG_OLD.md    # archive ("## " entries), created on demand

Programmatic API:
    from relnotes.pipeline.changelog import check_stage, edit_stage, run_release
    context = ReleaseContext(cwd=Path("."), version_new="2.3.4")
    stats = run_release(context, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Tuple

# --- Local imports ---
from relnotes.core.cli import ReleaseStats
from relnotes.core.exceptions import ChangelogWriteError, ReleaseError
from relnotes.core.logging_manager import RelnotesLogger, safe_logger
from relnotes.core.paths import CHANGELOG_FILENAME, README_FILENAME
from relnotes.dataclasses.changelog_document import (
    ARCHIVE_LAYOUT,
    PRIMARY_LAYOUTS,
    ChangelogDocument,
    DocumentLayout,
)
from relnotes.pipeline.context import ReleaseContext
from relnotes.pipeline.resolver import resolve_in_entries
from relnotes.pipeline.retention import redistribute_entries
from relnotes.validators.changelog import classify_entries, validate_archive, validate_primary


# --- Discovery ---
def find_primary_layout(project_dir: Path) -> Optional[DocumentLayout]:
    """Return the layout of the first primary candidate present on disk."""
    for layout in PRIMARY_LAYOUTS:
        if (project_dir / layout.filename).is_file():
            return layout
    return None


def discover_documents(
    project_dir: Path,
) -> Tuple[Optional[Tuple[Path, DocumentLayout]], Optional[Path]]:
    """
    Locate the candidate documents of a project.

    Returns:
        ((primary path, layout) or None, archive path or None)
    """
    layout = find_primary_layout(project_dir)
    primary = (project_dir / layout.filename, layout) if layout else None
    archive_path = project_dir / ARCHIVE_LAYOUT.filename
    return primary, archive_path if archive_path.is_file() else None


# --- Check stage ---
def check_stage(context: ReleaseContext, logger: Optional[RelnotesLogger] = None) -> None:
    """
    Inspection pass: parse and validate all changelog documents.

    Validation problems are accumulated in context.errors; every check runs
    even if an earlier one failed.

    Args:
        context: Release context; cwd is read, documents are published
        logger: Optional logger for operation tracking

    Raises:
        ReleaseError: (fatal) if neither a primary document nor an archive
            exists in the project directory
    """
    log = safe_logger(logger)
    log.log_operation("check_stage_start", {"cwd": str(context.cwd)})

    primary, archive_path = discover_documents(context.cwd)

    if primary is None and archive_path is None:
        raise ReleaseError(
            f"No {CHANGELOG_FILENAME} or {README_FILENAME} found in {context.cwd}!",
            fatal=True,
        )

    if primary is None:
        context.add_error(
            f"The changelog placeholder is missing: no {CHANGELOG_FILENAME} "
            f"or {README_FILENAME} next to {ARCHIVE_LAYOUT.filename}!"
        )
    else:
        path, layout = primary
        document = ChangelogDocument.from_file(path, layout)
        context.primary = document
        log.log_debug(
            f"Parsed {path.name}",
            {
                "location": layout.role.value,
                "entry_prefix": layout.entry_prefix,
                "entries": len(document.entries),
            },
        )
        _report_folded_headings(context, document, log)

        for error in validate_primary(document):
            log.log_warning(error)
            context.add_error(error)

        classified = classify_entries(document.entries)
        if classified.released:
            latest = classified.released[0]
            log.log_debug(
                "Latest released entry",
                {"version": latest.version, "date": latest.release_date},
            )
        if classified.placeholder is not None:
            context.changelog_new = classified.placeholder.raw_body.strip()

    if archive_path is not None:
        archive = ChangelogDocument.from_file(archive_path, ARCHIVE_LAYOUT)
        context.archive = archive
        log.log_debug(f"Parsed {archive_path.name}", {"entries": len(archive.entries)})
        _report_folded_headings(context, archive, log)

        for error in validate_archive(archive):
            log.log_warning(error)
            context.add_error(error)

    log.log_operation(
        "check_stage_complete",
        {
            "changelog": context.changelog_filename,
            "combined_entries": len(context.combined_entries),
            "errors": len(context.errors),
        },
    )


def _report_folded_headings(context: ReleaseContext, document: ChangelogDocument, log) -> None:
    for heading in document.folded_headings:
        message = (
            f"{document.path.name}: heading '{heading}' sits between changelog "
            f"entries and was kept inside the entry before it"
        )
        log.log_warning(message)
        context.add_warning(message)


# --- Edit stage ---
def render_documents(context: ReleaseContext) -> Tuple[List[ChangelogDocument], int]:
    """
    Compute the final documents of a release without touching the disk.

    Returns:
        (documents to write, number of entries moved to the archive)

    Raises:
        ReleaseError: If the context lacks what the edit stage needs
    """
    if context.primary is None:
        raise ReleaseError("No changelog was parsed; run the check stage first", fatal=True)
    if not context.version_new:
        raise ReleaseError("No version to release was given", fatal=True)

    entries, index = resolve_in_entries(
        context.primary.entries, context.version_new, context.release_date
    )
    if index is None:
        raise ReleaseError(
            f"The changelog placeholder is missing from {context.changelog_filename}!",
            fatal=True,
        )

    archive_entries = context.archive.entries if context.archive else []
    result = redistribute_entries(
        entries,
        archive_entries,
        context.num_changelog_entries,
        ARCHIVE_LAYOUT.entry_marker,
    )

    documents = [context.primary.with_entries(result.primary)]
    if result.changed:
        archive = context.archive or ChangelogDocument(
            path=context.cwd / ARCHIVE_LAYOUT.filename,
            layout=ARCHIVE_LAYOUT,
            header=context.archive_header,
        )
        documents.append(archive.with_entries(result.archive))

    return documents, len(result.moved)


def edit_stage(context: ReleaseContext, logger: Optional[RelnotesLogger] = None) -> ReleaseStats:
    """
    Write pass: resolve, redistribute, serialize and write.

    All documents are serialized before the first one is written. Under
    dry-run nothing is written; context.rendered still holds the texts.

    Args:
        context: Release context filled by the check stage (or by hand)
        logger: Optional logger for operation tracking

    Returns:
        ReleaseStats

    Raises:
        ReleaseError: If the context is not ready for editing
        ChangelogWriteError: If a file cannot be written
    """
    log = safe_logger(logger)
    stats = ReleaseStats(dry_run=context.dry_run)

    log.log_operation(
        "edit_stage_start",
        {
            "version": context.version_new,
            "date": context.release_date.isoformat(),
            "retention": context.num_changelog_entries,
            "dry_run": context.dry_run,
        },
    )

    documents, stats.entries_moved = render_documents(context)

    context.rendered = {doc.path: doc.to_text() for doc in documents}
    stats.files_processed = len(documents)
    stats.written_paths = list(context.rendered)

    if stats.entries_moved:
        log.log_info(
            f"Moving {stats.entries_moved} entries to {ARCHIVE_LAYOUT.filename}",
            {"kept": context.num_changelog_entries},
        )

    if context.dry_run:
        for path, text in context.rendered.items():
            log.log_debug(f"Dry run, not writing {path.name}", {"length": len(text)})
        log.log_operation("edit_stage_dry_run", {"files": [p.name for p in stats.written_paths]})
        return stats

    for path, text in context.rendered.items():
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            stats.errors += 1
            log.log_error(e, {"path": str(path)})
            raise ChangelogWriteError(f"Cannot write {path.name}: {e}") from e
        stats.files_written += 1
        log.log_info(f"Wrote {path.name}")

    log.log_operation("edit_stage_complete", {"summary": stats.summary()})
    return stats


# --- Full run ---
def run_release(context: ReleaseContext, logger: Optional[RelnotesLogger] = None) -> ReleaseStats:
    """
    Run the check stage, then the edit stage if no errors accumulated.

    Raises:
        ReleaseError: fatal from the check stage, or non-fatal carrying all
            accumulated validation errors (nothing written in either case)
    """
    check_stage(context, logger)
    if context.has_errors:
        raise ReleaseError.from_errors(context.errors)
    return edit_stage(context, logger)
