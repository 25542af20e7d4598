from .date import Date, parse_date
from .errors import (
    ErrorKind,
    GrammarError,
    GrammarErrorKind,
    VersionParseError,
)
from .semantic import parse_semver
from .version import (
    UNRELEASED,
    Released,
    Unreleased,
    Version,
    parse_version,
    released,
)

__all__ = [
    # Date
    "Date",
    "parse_date",
    # Versions
    "UNRELEASED",
    "Released",
    "Unreleased",
    "Version",
    "parse_semver",
    "parse_version",
    "released",
    # Errors
    "ErrorKind",
    "GrammarError",
    "GrammarErrorKind",
    "VersionParseError",
]
