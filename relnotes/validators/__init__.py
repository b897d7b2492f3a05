"""
validators
----------
Validation of changelog documents before a release.

- changelog: placeholder presence, uniqueness and content checks

Each check returns plain error messages instead of raising, so the check
stage can report every problem of a run together.

Usage:
    from relnotes.validators.changelog import validate_primary, validate_archive
"""

__all__ = [
    "changelog",
]
