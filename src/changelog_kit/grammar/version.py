# src/changelog_kit/grammar/version.py

"""Version heading grammar.

A version heading is, case-insensitively, one of::

    [\\[] "unreleased" [\\]]
    [\\[] semver [\\]] [ "-" YYYY-MM-DD ]

Matching is prefix-based: anything after the recognized form is ignored.
"""

from dataclasses import dataclass
from typing import TypeAlias

import semver

from .date import Date, parse_date
from .errors import GrammarError, GrammarErrorKind
from .semantic import parse_semver

UNRELEASED_MARKER = "unreleased"
HORIZONTAL_SPACE = " \t"


@dataclass(frozen=True)
class Unreleased:
    """The pending, not yet released section of a changelog."""

    def __str__(self) -> str:
        return "Unreleased"


@dataclass(frozen=True)
class Released:
    version: semver.Version
    date: Date | None = None

    def __str__(self) -> str:
        if self.date is None:
            return str(self.version)
        return f"{self.version} - {self.date}"


Version: TypeAlias = Unreleased | Released

UNRELEASED = Unreleased()


def released(version: Version) -> tuple[semver.Version, Date | None] | None:
    """Return ``(semver, date)`` for a released version, ``None`` for Unreleased."""
    if isinstance(version, Released):
        return version.version, version.date
    return None


def _match_marker(text: str, offset: int) -> bool:
    end = offset + len(UNRELEASED_MARKER)
    return text[offset:end].lower() == UNRELEASED_MARKER


def _parse_unreleased(text: str) -> bool:
    if _match_marker(text, 0):
        return True
    closing = 1 + len(UNRELEASED_MARKER)
    return (
        text[:1] == "["
        and _match_marker(text, 1)
        and text[closing : closing + 1] == "]"
    )


def _parse_released(text: str) -> tuple[semver.Version, str]:
    try:
        return parse_semver(text)
    except GrammarError:
        if not text.startswith("["):
            raise

    try:
        version, rest = parse_semver(text[1:])
    except GrammarError as exc:
        raise exc.shifted(1, text) from exc

    if not rest.startswith("]"):
        raise GrammarError(
            GrammarErrorKind.TAG,
            expected="']'",
            text=text,
            offset=len(text) - len(rest),
        )
    return version, rest[1:]


def _parse_trailing_date(text: str) -> Date | None:
    rest = text.lstrip(HORIZONTAL_SPACE)
    if not rest.startswith("-"):
        return None
    rest = rest[1:].lstrip(HORIZONTAL_SPACE)
    try:
        date, _ = parse_date(rest)
    except GrammarError:
        return None
    return date


def parse_version(text: str) -> Version:
    """Parse the plain text of a version heading.

    The unreleased form is tried first. A released form without a
    trailing date (or with a malformed one) is still a release.

    Raises:
        GrammarError: If ``text`` matches neither form.
    """
    if _parse_unreleased(text):
        return UNRELEASED

    version, rest = _parse_released(text)
    return Released(version=version, date=_parse_trailing_date(rest))
