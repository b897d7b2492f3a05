"""
conftest.py
-----------
Shared pytest fixtures for relnotes tests.

Provides fixtures for:
- Changelog text fragments (headers, entries, footers)
- Project directories populated with changelog files
- Test data factories
"""
import pytest
from datetime import date
from pathlib import Path


# ----- Changelog fragments -----

CHANGELOG_HEADER = "# Changelog"
CHANGELOG_WIP = """## **WORK IN PROGRESS** · Doomsday release
* New entry 1
* New entry 2"""
CHANGELOG_123 = """## 1.2.3 Other release
* Did something"""
CHANGELOG_120 = """## 1.2.0 Other release
* Did something else"""

README_HEADER = """# README
stuff
## Changelog"""
README_WIP = """### **WORK IN PROGRESS** · Doomsday release
* New entry 1
* New entry 2"""
README_123 = """### 1.2.3 Other release
* Did something"""
README_120 = """### 1.2.0 Other release
* Did something else"""

OLD_HEADER = "# Changelog (older changes)"
OLD_100 = """## 1.0.0 Old release
* Did something"""
OLD_001 = """## 0.0.1 Older release
* Did something else"""
OLD_FOOTER = "# Unrelated stuff"

RELEASE_DATE = date(2024, 1, 15)


def resolved(heading_marker: str) -> str:
    """Expected text of the Doomsday entry released as 2.3.4 on RELEASE_DATE."""
    return f"""{heading_marker} 2.3.4 ({RELEASE_DATE.isoformat()}) · Doomsday release
* New entry 1
* New entry 2"""


# ----- Path Fixtures -----

@pytest.fixture
def project_dir(tmp_path):
    """Empty project directory."""
    directory = tmp_path / "project"
    directory.mkdir()
    return directory


@pytest.fixture
def write_files(project_dir):
    """Factory writing {filename: content} into the project directory."""
    def _write(files):
        for name, content in files.items():
            (project_dir / name).write_text(content, encoding="utf-8")
        return project_dir
    return _write


# ----- Sample document content -----

@pytest.fixture
def changelog_content():
    """CHANGELOG.md with a placeholder and two released entries."""
    return f"{CHANGELOG_HEADER}\n{CHANGELOG_WIP}\n\n{CHANGELOG_123}\n\n{CHANGELOG_120}"


@pytest.fixture
def readme_content():
    """README.md with an embedded Changelog section."""
    return f"{README_HEADER}\n{README_WIP}\n\n{README_123}\n\n{README_120}"


@pytest.fixture
def changelog_old_content():
    """CHANGELOG_OLD.md with two entries and an unrelated footer section."""
    return f"{OLD_HEADER}\n{OLD_100}\n\n{OLD_001}\n\n{OLD_FOOTER}"
