#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the relnotes project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in the release stages.

Exception Hierarchy:
    Exception (built-in)
    ├── ReleaseError - A release run cannot continue (fatal or accumulated)
    ├── ConfigError - Invalid configuration file or option value
    ├── ValidationError - Data validation failures
    ├── ChangelogParseError - Invalid input to the document parser
    └── ChangelogWriteError - Serialized documents could not be written

Usage:
    from relnotes.core.exceptions import ReleaseError, ConfigError

    try:
        run_release(context)
    except ReleaseError as e:
        logger.error(f"Release aborted: {e}")
"""
from __future__ import annotations

from typing import List, Optional


class ReleaseError(Exception):
    """
    Exception raised when a release run must stop.

    Two flavours exist:
    - fatal: a structural problem (no changelog document at all). Raised
      immediately from the stage that detects it.
    - accumulated: validation problems collected in the execution context
      during the check stage. Raised once, carrying every message, before
      the edit stage would have started.

    Attributes:
        fatal: True when the run was aborted by an unrecoverable condition
        errors: Individual error messages (one per problem found)

    Examples:
        >>> raise ReleaseError("No CHANGELOG.md or README.md found!", fatal=True)
        >>> raise ReleaseError.from_errors(["placeholder is missing", "..."])
    """

    def __init__(
        self,
        message: str,
        fatal: bool = False,
        errors: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.fatal = fatal
        self.errors = list(errors) if errors else [message]

    @classmethod
    def from_errors(cls, errors: List[str]) -> ReleaseError:
        """Build a non-fatal error summarizing all accumulated messages."""
        count = len(errors)
        noun = "error" if count == 1 else "errors"
        lines = [f"Release aborted with {count} {noun}:"]
        lines.extend(f"  - {error}" for error in errors)
        return cls("\n".join(lines), fatal=False, errors=errors)


class ConfigError(Exception):
    """
    Exception for configuration failures.

    Raised when the configuration file cannot be read or parsed, contains
    unknown keys, or holds a value of the wrong type.

    Examples:
        >>> raise ConfigError("Unknown configuration key: 'num_entries'")
        >>> raise ConfigError("num_changelog_entries must be a positive integer")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised by DataValidator when an input value cannot be normalized:
    - Invalid date formats
    - Non-numeric counts
    - Dates of an unsupported type

    Examples:
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
        >>> raise ValidationError("Cannot convert 'many' to integer")
    """

    pass


class ChangelogParseError(Exception):
    """
    Exception for parser misuse.

    Malformed changelog *content* never raises; the parser reports zero
    entries instead. This is raised only for invalid parser arguments,
    such as an entry marker that is not made of heading characters.

    Examples:
        >>> raise ChangelogParseError("Entry marker must be one or more '#': '##x'")
    """

    pass


class ChangelogWriteError(Exception):
    """
    Exception for failures while writing serialized documents.

    Raised during the edit stage when the operating system refuses to
    write a changelog file:
    - Permission issues
    - Missing parent directory
    - Disk full

    Examples:
        >>> raise ChangelogWriteError("Cannot write CHANGELOG.md: permission denied")
    """

    pass
