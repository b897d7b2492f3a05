#!/usr/bin/env python3
"""
validators.py
--------------------
Normalization of configuration and context values.

Settings arrive from YAML (`.relnotes.yml`), from click options and from
Python callers, so a count may be an int or a numeric string and a date a
date, a datetime or an ISO string. DataValidator turns each into one
canonical type or raises ValidationError.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from .exceptions import ValidationError


class DataValidator:
    """Static normalizers; None always passes through as None."""

    @staticmethod
    def normalize_date(value: Any) -> Optional[date]:
        """
        Return a date for a date, datetime or 'YYYY-MM-DD' string.

        Raises:
            ValidationError: If a string is not an ISO date

        Examples:
            >>> DataValidator.normalize_date("2024-01-15")
            datetime.date(2024, 1, 15)
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return date.fromisoformat(value.strip())
            except ValueError as e:
                raise ValidationError(
                    f"Invalid date format: expected YYYY-MM-DD, got '{value}'"
                ) from e
        raise ValidationError(f"Cannot convert {type(value).__name__} '{value}' to a date")

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """Strip a value's text; empty text becomes None."""
        if value is None:
            return None
        return str(value).strip() or None

    @staticmethod
    def normalize_int(value: Any) -> Optional[int]:
        """
        Convert an int, integral float or numeric string to int.

        Booleans are rejected even though they are ints in Python; YAML
        turns `yes` into True, which is never a meaningful count.

        Raises:
            ValidationError: If the value is not integral
        """
        if value is None:
            return None
        if isinstance(value, bool):
            raise ValidationError(f"Cannot convert boolean '{value}' to integer")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError as e:
                raise ValidationError(f"Cannot convert '{value}' to integer") from e
        raise ValidationError(f"Cannot convert '{value}' to integer")
