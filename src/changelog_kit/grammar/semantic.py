# src/changelog_kit/grammar/semantic.py

import re

import semver

from .errors import GrammarError, GrammarErrorKind

_NUMBER = r"(?:0|[1-9]\d*)"
_IDENTIFIER = r"(?:\d*[a-zA-Z-][0-9a-zA-Z-]*|0|[1-9]\d*)"

# Leading semver literal. Anchored only at the start: headings carry more text.
SEMVER_PREFIX = re.compile(
    rf"{_NUMBER}\.{_NUMBER}\.{_NUMBER}"
    rf"(?:-{_IDENTIFIER}(?:\.{_IDENTIFIER})*)?"
    r"(?:\+[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*)?"
)


def parse_semver(text: str) -> tuple[semver.Version, str]:
    """Parse the semantic version literal at the start of ``text``.

    Returns the validated version and the unconsumed remainder.
    """
    match = SEMVER_PREFIX.match(text)
    if match is None:
        raise GrammarError(
            GrammarErrorKind.SEMVER, expected="semantic version", text=text
        )

    try:
        version = semver.Version.parse(match.group(0))
    except ValueError as exc:
        raise GrammarError(
            GrammarErrorKind.SEMVER, expected="semantic version", text=text
        ) from exc
    return version, text[match.end() :]
