from pathlib import Path

import pytest

from changelog_kit.parsers.markdown_parser import MarkdownParser
from changelog_kit.parsers.models import Block

CHANGELOG = """# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/).

## [Unreleased]

### Added

- Support for *tab-separated* dates.

## [1.1.0] - 2023-03-05

### Fixed

- Crash on empty headings.
- Wrong offsets in errors.

## Release notes

Preview builds are published weekly.

## [1.0.0] - 2023-01-01

### Added

- Initial release.

## 0.1.0

First prototype.
"""

NO_VERSIONS = """# Project

## Installation

Run the installer.

### 1.0.0

Nested headings never count.
"""


@pytest.fixture(scope="module")
def changelog_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the sample documents once per module."""
    dir_path: Path = tmp_path_factory.mktemp("changelogs")

    (dir_path / "CHANGELOG.md").write_text(CHANGELOG, encoding="utf-8")
    (dir_path / "README.md").write_text(NO_VERSIONS, encoding="utf-8")

    return dir_path


@pytest.fixture(scope="module")
def changelog_path(changelog_dir: Path) -> Path:
    return changelog_dir / "CHANGELOG.md"


@pytest.fixture(scope="module")
def changelog_blocks(changelog_path: Path) -> list[Block]:
    """Parse the sample changelog once, reuse across tests."""
    with open(changelog_path, "rb") as f:
        return MarkdownParser().parse(f)
