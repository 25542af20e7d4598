import json
from pathlib import Path

import pytest

from changelog_kit.cli import EXIT_NO_MATCH, EXIT_NOT_FOUND, main

CHANGELOG = """# Changelog

## [Unreleased]

- Pending work.

## [0.2.0] - 2022-02-02

- Second release.

## [0.1.0] - 2022-01-01

- First release.
"""


@pytest.fixture
def changelog(tmp_path: Path) -> Path:
    path = tmp_path / "CHANGELOG.md"
    path.write_text(CHANGELOG)
    return path


class TestMain:
    def test_prints_all_entries_by_default(
        self, changelog: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(changelog)]) == 0

        out = capsys.readouterr().out
        assert "## Unreleased" in out
        assert "## 0.2.0 - 2022-02-02" in out
        assert "## 0.1.0 - 2022-01-01" in out

    def test_selects_single_version(
        self, changelog: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(changelog), "--select", "0.1.0"]) == 0

        out = capsys.readouterr().out
        assert out == "## 0.1.0 - 2022-01-01\n\n- First release.\n"

    def test_json_output(
        self, changelog: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        argv = [str(changelog), "--select", "latest-released", "--format", "json"]

        assert main(argv) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload == [
            {
                "version": "0.2.0",
                "released": True,
                "date": "2022-02-02",
                "body": "- Second release.",
            }
        ]

    def test_config_file_supplies_defaults(
        self, changelog: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "changelog-kit.yaml"
        config.write_text("path: CHANGELOG.md\nselect: unreleased\n")

        assert main(["--config", str(config)]) == 0

        assert capsys.readouterr().out == "## Unreleased\n\n- Pending work.\n"

    def test_config_output_format_html(
        self, changelog: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "changelog-kit.yaml"
        config.write_text("select: 0.1.0\noutput_format: html\n")

        assert main(["--config", str(config)]) == 0

        assert capsys.readouterr().out == (
            "<h2>0.1.0 - 2022-01-01</h2>\n<ul>\n<li>First release.</li>\n</ul>\n\n"
        )

    def test_flags_override_config_file(
        self, changelog: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "changelog-kit.yaml"
        config.write_text("select: unreleased\n")

        assert main(["--config", str(config), "--select", "0.2.0"]) == 0

        assert capsys.readouterr().out.startswith("## 0.2.0")

    def test_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "missing.md")]) == EXIT_NOT_FOUND

        assert "Cannot read" in capsys.readouterr().err

    def test_document_without_versions(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "README.md"
        path.write_text("# Readme\n\n## Usage\n\nRun it.\n")

        assert main([str(path)]) == EXIT_NOT_FOUND

        assert "No changelog entries found" in capsys.readouterr().err

    def test_unmatched_selection(
        self, changelog: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(changelog), "--select", "9.9.9"]) == EXIT_NO_MATCH

        assert "9.9.9" in capsys.readouterr().err

    def test_invalid_selection_is_usage_error(self, changelog: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(changelog), "--select", "newest"])

        assert exc_info.value.code == 2
