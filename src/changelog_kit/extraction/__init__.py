from .config import ExtractionConfig, OutputFormat, load_config
from .extractor import (
    ChangelogNotFoundError,
    format_entries,
    load_changelog,
    select_entries,
)

__all__ = [
    # Config
    "ExtractionConfig",
    "OutputFormat",
    "load_config",
    # Extraction
    "ChangelogNotFoundError",
    "format_entries",
    "load_changelog",
    "select_entries",
]
