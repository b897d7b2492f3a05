"""
test_changelog_document.py
--------------------------
Unit tests for ChangelogDocument and the document layouts.
"""
from pathlib import Path

from relnotes.dataclasses.changelog_document import (
    ARCHIVE_LAYOUT,
    EMBEDDED_LAYOUT,
    PRIMARY_LAYOUTS,
    STANDALONE_LAYOUT,
    ChangelogDocument,
    DocumentRole,
)
from relnotes.dataclasses.changelog_entry import ChangelogEntry

from conftest import (
    CHANGELOG_120,
    CHANGELOG_123,
    CHANGELOG_HEADER,
    CHANGELOG_WIP,
    OLD_001,
    OLD_100,
    OLD_FOOTER,
    OLD_HEADER,
    README_HEADER,
    README_WIP,
)


class TestLayouts:
    """Test the fixed document layouts."""

    def test_primary_preference(self):
        """CHANGELOG.md is preferred over README.md."""
        assert [layout.filename for layout in PRIMARY_LAYOUTS] == ["CHANGELOG.md", "README.md"]

    def test_entry_prefixes(self):
        assert STANDALONE_LAYOUT.entry_prefix == "## "
        assert EMBEDDED_LAYOUT.entry_prefix == "### "
        assert ARCHIVE_LAYOUT.entry_prefix == "## "

    def test_embedded_section_heading(self):
        assert EMBEDDED_LAYOUT.section_heading == "## Changelog"
        assert STANDALONE_LAYOUT.section_heading is None

    def test_roles(self):
        assert STANDALONE_LAYOUT.role.is_primary
        assert EMBEDDED_LAYOUT.role.is_primary
        assert not ARCHIVE_LAYOUT.role.is_primary
        assert DocumentRole.EMBEDDED_SECTION.value == "readme"


class TestFromText:
    """Test parsing into a document."""

    def test_standalone(self, changelog_content):
        document = ChangelogDocument.from_text(Path("CHANGELOG.md"), STANDALONE_LAYOUT, changelog_content)
        assert document.header == CHANGELOG_HEADER + "\n"
        assert document.raw_entries == [CHANGELOG_WIP, CHANGELOG_123, CHANGELOG_120]
        assert document.footer == ""
        assert document.role is DocumentRole.STANDALONE
        assert [e.text for e in document.placeholders] == [CHANGELOG_WIP]

    def test_embedded(self, readme_content):
        document = ChangelogDocument.from_text(Path("README.md"), EMBEDDED_LAYOUT, readme_content)
        assert document.header == README_HEADER + "\n"
        assert document.raw_entries[0] == README_WIP
        assert document.entry_prefix == "### "

    def test_from_file(self, write_files, changelog_old_content):
        cwd = write_files({"CHANGELOG_OLD.md": changelog_old_content})
        document = ChangelogDocument.from_file(cwd / "CHANGELOG_OLD.md", ARCHIVE_LAYOUT)
        assert document.path == cwd / "CHANGELOG_OLD.md"
        assert document.raw_entries == [OLD_100, OLD_001]
        assert document.footer == OLD_FOOTER
        assert document.placeholders == []


class TestRendering:
    """Test serialization and entry replacement."""

    def test_to_text_reproduces_normalized_input(self, changelog_old_content):
        document = ChangelogDocument.from_text(Path("CHANGELOG_OLD.md"), ARCHIVE_LAYOUT, changelog_old_content)
        assert document.to_text() == changelog_old_content

    def test_to_text_normalizes(self):
        document = ChangelogDocument.from_text(
            Path("CHANGELOG.md"), STANDALONE_LAYOUT, "# Changelog\n\n\n\n## 1.0.0\n* a\n\n\n\n## 0.1.0\n* b\n"
        )
        assert document.to_text() == "# Changelog\n\n## 1.0.0\n* a\n\n## 0.1.0\n* b"

    def test_with_entries(self, changelog_old_content):
        document = ChangelogDocument.from_text(Path("CHANGELOG_OLD.md"), ARCHIVE_LAYOUT, changelog_old_content)
        copy = document.with_entries([ChangelogEntry.from_text(OLD_001)])
        assert copy.raw_entries == [OLD_001]
        assert copy.header == document.header
        assert copy.footer == document.footer
        assert document.raw_entries == [OLD_100, OLD_001]

    def test_new_archive(self):
        """An empty archive with a header serializes header then entries."""
        document = ChangelogDocument(path=Path("CHANGELOG_OLD.md"), layout=ARCHIVE_LAYOUT, header=OLD_HEADER)
        copy = document.with_entries([ChangelogEntry.from_text(OLD_100)])
        assert copy.to_text() == f"{OLD_HEADER}\n{OLD_100}"
