# src/changelog_kit/grammar/errors.py

from enum import Enum


class GrammarErrorKind(str, Enum):
    """Why a low-level grammar rule rejected its input."""

    DIGIT = "digit"
    TAG = "tag"
    EOF = "eof"
    SEMVER = "semver"


class GrammarError(ValueError):
    """A grammar rule failed at ``offset`` while looking for ``expected``.

    ``text`` is the input the failing rule was given, so ``text[offset:]``
    is the slice it could not match.
    """

    def __init__(
        self,
        kind: GrammarErrorKind,
        *,
        expected: str,
        text: str,
        offset: int = 0,
    ) -> None:
        self.kind = kind
        self.expected = expected
        self.text = text
        self.offset = offset
        super().__init__(
            f"expected {expected} at offset {offset}: {text[offset:offset + 16]!r}"
        )

    def shifted(self, by: int, text: str) -> "GrammarError":
        """Re-anchor this error inside ``text``, which starts ``by`` chars earlier."""
        return GrammarError(
            self.kind, expected=self.expected, text=text, offset=self.offset + by
        )


class ErrorKind(str, Enum):
    """Why a document block is not a version heading."""

    HEADER = "header"
    SINGLE_SPAN = "single_span"
    FORMAT = "format"
    UTF8 = "utf8"


class VersionParseError(ValueError):
    """A block could not be classified as a version heading.

    Never fatal: the segmenter treats every instance as "not a boundary".
    """

    def __init__(
        self,
        kind: ErrorKind,
        *,
        text: str | None = None,
        cause: GrammarError | None = None,
    ) -> None:
        self.kind = kind
        self.text = text
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{kind.value}{detail}")

    @classmethod
    def format(cls, text: str, cause: GrammarError) -> "VersionParseError":
        return cls(ErrorKind.FORMAT, text=text, cause=cause)
