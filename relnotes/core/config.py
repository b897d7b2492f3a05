#!/usr/bin/env python3
"""
config.py
-------------------
Project configuration for release runs.

Settings live in an optional `.relnotes.yml` at the project root:

    # .relnotes.yml
    num_changelog_entries: 5
    archive_header: |
      # Changelog (older changes)

Command-line options take precedence over file values
(see ReleaseConfig.merged).

Usage:
    from relnotes.core.config import load_config

    config = load_config(Path("."))
    config = config.merged(num_changelog_entries=3)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from relnotes.core.exceptions import ConfigError, ValidationError
from relnotes.core.paths import CONFIG_FILENAME, DEFAULT_ARCHIVE_HEADER
from relnotes.core.validators import DataValidator


@dataclass(frozen=True)
class ReleaseConfig:
    """
    Release settings.

    Attributes:
        num_changelog_entries: Entries kept in the current changelog before
            older ones migrate to the archive (None disables retention)
        archive_header: Header used when the archive document is created
    """

    num_changelog_entries: Optional[int] = None
    archive_header: str = DEFAULT_ARCHIVE_HEADER

    def __post_init__(self) -> None:
        if self.num_changelog_entries is not None and self.num_changelog_entries < 1:
            raise ConfigError(
                "num_changelog_entries must be a positive integer, "
                f"got {self.num_changelog_entries}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ReleaseConfig:
        """
        Build a config from a parsed YAML mapping.

        Raises:
            ConfigError: On unknown keys or values that cannot be normalized
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        try:
            num_entries = DataValidator.normalize_int(data.get("num_changelog_entries"))
        except ValidationError as e:
            raise ConfigError(f"num_changelog_entries: {e}") from e

        header = data.get("archive_header", DEFAULT_ARCHIVE_HEADER)
        if not isinstance(header, str) or not header.strip():
            raise ConfigError("archive_header must be a non-empty string")

        return cls(num_changelog_entries=num_entries, archive_header=header)

    def merged(self, **overrides: Any) -> ReleaseConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_config(project_dir: Path, filename: str = CONFIG_FILENAME) -> ReleaseConfig:
    """
    Load `.relnotes.yml` from a project directory.

    A missing or empty file yields the default configuration.

    Args:
        project_dir: Directory containing the configuration file
        filename: Configuration filename (default: .relnotes.yml)

    Returns:
        ReleaseConfig

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    path = Path(project_dir) / filename
    if not path.is_file():
        return ReleaseConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {path.name}: {e}") from e

    if data is None:
        return ReleaseConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping, got {type(data).__name__}")

    return ReleaseConfig.from_dict(data)
