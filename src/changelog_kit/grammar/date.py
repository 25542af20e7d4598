# src/changelog_kit/grammar/date.py

from dataclasses import dataclass

from .errors import GrammarError, GrammarErrorKind


@dataclass(frozen=True)
class Date:
    """Release date as written in a heading.

    Fields are decoded from fixed-width digit groups only. Ranges are not
    checked, so ``2023-99-99`` is a valid ``Date``.
    """

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def _decimal(text: str, offset: int, width: int) -> tuple[int, int]:
    """Decode exactly ``width`` ASCII digits at ``offset``.

    Returns the value and the offset just past the group.
    """
    group = text[offset : offset + width]
    if len(group) < width:
        raise GrammarError(
            GrammarErrorKind.EOF,
            expected=f"{width} digits",
            text=text,
            offset=offset,
        )

    value = 0
    for char in group:
        if not "0" <= char <= "9":
            raise GrammarError(
                GrammarErrorKind.DIGIT,
                expected=f"{width} digits",
                text=text,
                offset=offset,
            )
        value = value * 10 + (ord(char) - ord("0"))
    return value, offset + width


def _dash(text: str, offset: int) -> int:
    if text[offset : offset + 1] != "-":
        raise GrammarError(
            GrammarErrorKind.TAG, expected="'-'", text=text, offset=offset
        )
    return offset + 1


def parse_date(text: str) -> tuple[Date, str]:
    """Parse a leading ``YYYY-MM-DD`` literal.

    Returns the date and whatever follows the ten consumed characters.

    Raises:
        GrammarError: If the input does not start with the literal.
    """
    year, offset = _decimal(text, 0, 4)
    offset = _dash(text, offset)
    month, offset = _decimal(text, offset, 2)
    offset = _dash(text, offset)
    day, offset = _decimal(text, offset, 2)
    return Date(year=year, month=month, day=day), text[offset:]
