from .changelog import Changelog, ChangelogEntry, Classifier
from .classifier import classify_block, heading_text, inline_runs, is_version_heading

__all__ = [
    "Changelog",
    "ChangelogEntry",
    "Classifier",
    "classify_block",
    "heading_text",
    "inline_runs",
    "is_version_heading",
]
