# src/changelog_kit/extraction/extractor.py

import json
import logging
from collections.abc import Iterable, Sequence
from html import escape
from pathlib import Path
from time import monotonic

import semver

from changelog_kit.grammar.errors import GrammarError
from changelog_kit.grammar.semantic import parse_semver
from changelog_kit.grammar.version import Released, Unreleased
from changelog_kit.observability import names
from changelog_kit.observability.base import MetricsHook, NoOpMetricsHook
from changelog_kit.parsers.markdown_parser import MarkdownParser
from changelog_kit.parsers.render import render_html, render_text
from changelog_kit.segmentation.changelog import Changelog, ChangelogEntry

from .config import OutputFormat

logger = logging.getLogger(__name__)

SELECT_ALL = "all"
SELECT_LATEST = "latest"
SELECT_LATEST_RELEASED = "latest-released"
SELECT_UNRELEASED = "unreleased"


class ChangelogNotFoundError(LookupError):
    """The document contains no version heading at all."""

    def __init__(self, source: str | Path) -> None:
        self.source = source
        super().__init__(f"No changelog entries found in {source}")


def load_changelog(
    path: str | Path,
    *,
    plugins: Sequence[str] = (),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[ChangelogEntry]:
    """Parse a changelog file into its entries, newest first as written.

    Raises:
        ChangelogNotFoundError: If the file has no version heading.
    """
    start = monotonic()
    parser = MarkdownParser(plugins=plugins, metrics_hook=metrics_hook)
    with open(path, "rb") as f:
        blocks = parser.parse(f)

    changelog = Changelog.from_blocks(blocks, metrics_hook=metrics_hook)
    if changelog is None:
        logger.error("No version headings in %s", path)
        raise ChangelogNotFoundError(path)

    entries = list(changelog)
    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.EXTRACTION_DURATION, elapsed_ms)
    logger.info("Loaded %d changelog entries from %s", len(entries), path)
    return entries


def _parse_selected_version(select: str) -> semver.Version:
    try:
        version, rest = parse_semver(select)
    except GrammarError as exc:
        raise ValueError(f"Invalid selection: {select!r}") from exc
    if rest:
        raise ValueError(f"Invalid selection: {select!r}")
    return version


def select_entries(
    entries: Iterable[ChangelogEntry], select: str
) -> list[ChangelogEntry]:
    """Pick entries by keyword or by exact semantic version.

    Raises:
        ValueError: If ``select`` is neither a keyword nor a version.
        KeyError: If nothing matches.
    """
    items = list(entries)
    key = select.strip().lower()

    if key == SELECT_ALL:
        selected = items
    elif key == SELECT_LATEST:
        selected = items[:1]
    elif key == SELECT_LATEST_RELEASED:
        selected = [e for e in items if isinstance(e.version, Released)][:1]
    elif key == SELECT_UNRELEASED:
        selected = [e for e in items if isinstance(e.version, Unreleased)][:1]
    else:
        wanted = _parse_selected_version(select.strip().lstrip("v"))
        selected = [
            e
            for e in items
            if isinstance(e.version, Released) and e.version.version == wanted
        ]

    if not selected:
        logger.error("No changelog entry matches: %s", select)
        raise KeyError(f"No changelog entry matches '{select}'")
    return selected


def _entry_json(entry: ChangelogEntry) -> dict[str, object]:
    version = entry.version
    if isinstance(version, Released):
        return {
            "version": str(version.version),
            "released": True,
            "date": str(version.date) if version.date is not None else None,
            "body": render_text(entry.blocks),
        }
    return {
        "version": str(version),
        "released": False,
        "date": None,
        "body": render_text(entry.blocks),
    }


def format_entries(
    entries: Sequence[ChangelogEntry], output_format: OutputFormat = "text"
) -> str:
    if output_format == "json":
        return json.dumps([_entry_json(e) for e in entries], indent=2)

    if output_format == "html":
        return "\n".join(
            f"<h2>{escape(str(e.version))}</h2>\n{render_html(e.blocks)}"
            for e in entries
        )

    if output_format == "text":
        sections = []
        for entry in entries:
            body = render_text(entry.blocks)
            heading = f"## {entry.version}"
            sections.append(f"{heading}\n\n{body}" if body else heading)
        return "\n\n".join(sections)

    raise ValueError(f"Unknown output format: {output_format}")
