# Grammar
from .grammar import (
    UNRELEASED,
    Date,
    ErrorKind,
    GrammarError,
    Released,
    Unreleased,
    Version,
    VersionParseError,
    parse_date,
    parse_version,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import Block, DocumentParser, MarkdownParser, render_html, render_text

# Segmentation
from .segmentation import Changelog, ChangelogEntry, classify_block, is_version_heading

# Extraction
from .extraction import (
    ChangelogNotFoundError,
    ExtractionConfig,
    format_entries,
    load_changelog,
    load_config,
    select_entries,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Grammar
    "UNRELEASED",
    "Date",
    "ErrorKind",
    "GrammarError",
    "Released",
    "Unreleased",
    "Version",
    "VersionParseError",
    "parse_date",
    "parse_version",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Block",
    "DocumentParser",
    "MarkdownParser",
    "render_html",
    "render_text",
    # Segmentation
    "Changelog",
    "ChangelogEntry",
    "classify_block",
    "is_version_heading",
    # Extraction
    "ChangelogNotFoundError",
    "ExtractionConfig",
    "format_entries",
    "load_changelog",
    "load_config",
    "select_entries",
]
