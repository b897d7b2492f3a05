"""
test_parser.py
--------------
Unit tests for relnotes.pipeline.parser.

Tests splitting of changelog documents into header, entries and footer for
standalone changelogs, README sections and archives.
"""
import logging

import pytest

from relnotes.core.exceptions import ChangelogParseError
from relnotes.pipeline.parser import parse_document

from conftest import (
    CHANGELOG_120,
    CHANGELOG_123,
    CHANGELOG_HEADER,
    CHANGELOG_WIP,
    OLD_001,
    OLD_100,
    OLD_FOOTER,
    OLD_HEADER,
    README_120,
    README_123,
    README_HEADER,
    README_WIP,
)


class TestStandaloneChangelog:
    """Test parsing of CHANGELOG.md style documents."""

    def test_parses_all_entries(self, changelog_content):
        """Header, three entries, empty footer."""
        parsed = parse_document(changelog_content, "##")
        assert parsed.header == CHANGELOG_HEADER + "\n"
        assert parsed.entries == [CHANGELOG_WIP, CHANGELOG_123, CHANGELOG_120]
        assert parsed.footer == ""

    def test_entries_are_trimmed(self):
        """Trailing blank lines belong to no entry."""
        text = "## 1.0.0\n* a\n\n\n\n## 0.9.0\n* b\n\n"
        parsed = parse_document(text, "##")
        assert parsed.entries == ["## 1.0.0\n* a", "## 0.9.0\n* b"]

    def test_header_kept_verbatim(self):
        """Blank lines between header and first entry stay in the header."""
        text = "# Changelog\n\nIntro text.\n\n## 1.0.0\n* a"
        parsed = parse_document(text, "##")
        assert parsed.header == "# Changelog\n\nIntro text.\n\n"

    def test_no_header(self):
        """A document may start directly with an entry."""
        parsed = parse_document(CHANGELOG_123, "##")
        assert parsed.header == ""
        assert parsed.entries == [CHANGELOG_123]


class TestNoEntries:
    """Test documents without matching heading lines."""

    def test_empty_text(self):
        """Empty document yields nothing."""
        parsed = parse_document("", "##")
        assert parsed.header == ""
        assert parsed.entries == []
        assert parsed.footer == ""

    def test_whole_text_is_header(self):
        """Without entries the entire text is the header."""
        text = "# Changelog\n\nNothing yet.\n"
        parsed = parse_document(text, "##")
        assert parsed.entries == []
        assert parsed.header == text
        assert parsed.footer == ""

    def test_other_levels_do_not_match(self):
        """Only the exact prefix delimits entries."""
        text = "# Changelog\n### 1.0.0\n* a\n#### 0.9.0"
        parsed = parse_document(text, "##")
        assert parsed.entries == []

    def test_marker_without_space_does_not_match(self):
        """'##1.0.0' is not a heading."""
        parsed = parse_document("##1.0.0\n* a", "##")
        assert parsed.entries == []

    def test_indented_heading_does_not_match(self):
        """Prefix must start at column 0."""
        parsed = parse_document("  ## 1.0.0\n* a", "##")
        assert parsed.entries == []


class TestFooter:
    """Test detection of trailing content after the last entry."""

    def test_higher_level_heading_starts_footer(self, changelog_old_content):
        """'# Unrelated stuff' after '## ' entries is the footer."""
        parsed = parse_document(changelog_old_content, "##")
        assert parsed.header == OLD_HEADER + "\n"
        assert parsed.entries == [OLD_100, OLD_001]
        assert parsed.footer == OLD_FOOTER

    def test_footer_trailing_text(self):
        """Footer keeps its own trailing line break."""
        text = "## 1.0.0\n* a\n\n# License\nMIT\n"
        parsed = parse_document(text, "##")
        assert parsed.entries == ["## 1.0.0\n* a"]
        assert parsed.footer == "# License\nMIT\n"

    def test_deeper_headings_stay_in_entry(self):
        """Sub-headings of an entry are part of its body."""
        text = "## 1.0.0\n### Features\n* a\n#### Detail\n* b"
        parsed = parse_document(text, "##")
        assert parsed.entries == [text]
        assert parsed.footer == ""

    def test_heading_between_entries_is_folded(self, caplog):
        """A higher-level heading followed by another entry stays in the entry before it."""
        text = "## 1.0.0\n* a\n\n# Interlude\ntext\n\n## 0.9.0\n* b"
        with caplog.at_level(logging.WARNING, logger="relnotes.pipeline.parser"):
            parsed = parse_document(text, "##")
        assert parsed.entries == ["## 1.0.0\n* a\n\n# Interlude\ntext", "## 0.9.0\n* b"]
        assert parsed.footer == ""
        assert parsed.folded_headings == ["# Interlude"]
        assert "Interlude" in caplog.text


class TestEmbeddedSection:
    """Test parsing of a Changelog section inside README.md."""

    def test_parses_section_entries(self, readme_content):
        """Entries are the '### ' headings after '## Changelog'."""
        parsed = parse_document(readme_content, "###", section_heading="## Changelog")
        assert parsed.header == README_HEADER + "\n"
        assert parsed.entries == [README_WIP, README_123, README_120]
        assert parsed.footer == ""

    def test_headings_before_section_are_ignored(self):
        """'### ' headings in other sections are not entries."""
        text = "# README\n## Usage\n### Install\npip install\n## Changelog\n### 1.0.0\n* a"
        parsed = parse_document(text, "###", section_heading="## Changelog")
        assert parsed.header == "# README\n## Usage\n### Install\npip install\n## Changelog\n"
        assert parsed.entries == ["### 1.0.0\n* a"]

    def test_next_section_is_footer(self):
        """The section ends at the next '## ' heading."""
        text = "# README\n## Changelog\n### 1.0.0\n* a\n\n## License\nMIT"
        parsed = parse_document(text, "###", section_heading="## Changelog")
        assert parsed.entries == ["### 1.0.0\n* a"]
        assert parsed.footer == "## License\nMIT"

    def test_closed_section_stays_closed(self, caplog):
        """Entry-level headings in later sections are footer, not entries."""
        text = (
            f"{README_HEADER}\n{README_WIP}\n\n{README_123}\n\n"
            "## License\n### MIT\nCopyright me"
        )
        with caplog.at_level(logging.WARNING, logger="relnotes.pipeline.parser"):
            parsed = parse_document(text, "###", section_heading="## Changelog")
        assert parsed.entries == [README_WIP, README_123]
        assert parsed.footer == "## License\n### MIT\nCopyright me"
        assert parsed.folded_headings == []
        assert caplog.text == ""

    def test_top_level_heading_closes_section(self):
        """A '# ' heading also ends the section for good."""
        text = "## Changelog\n### 1.0.0\n* a\n# Appendix\n### 0.9.0\n* b"
        parsed = parse_document(text, "###", section_heading="## Changelog")
        assert parsed.entries == ["### 1.0.0\n* a"]
        assert parsed.footer == "# Appendix\n### 0.9.0\n* b"

    def test_missing_section(self):
        """No Changelog section means no entries."""
        text = "# README\n### 1.0.0\n* a"
        parsed = parse_document(text, "###", section_heading="## Changelog")
        assert parsed.entries == []
        assert parsed.header == text

    def test_empty_section(self):
        """Section closed before any entry yields no entries."""
        text = "# README\n## Changelog\n## Other\n### 1.0.0\n* a"
        parsed = parse_document(text, "###", section_heading="## Changelog")
        assert parsed.entries == []


class TestInvalidMarker:
    """Test parser argument validation."""

    @pytest.mark.parametrize("marker", ["", "##x", "**", "# "])
    def test_rejects_non_heading_marker(self, marker):
        """Markers must be a run of '#'."""
        with pytest.raises(ChangelogParseError):
            parse_document("## 1.0.0", marker)
