# segmentation/classifier.py

from collections.abc import Mapping, Sequence
from typing import Any

from changelog_kit.grammar.errors import ErrorKind, GrammarError, VersionParseError
from changelog_kit.grammar.version import Version, parse_version
from changelog_kit.parsers.models import Block
from changelog_kit.parsers.render import render_inline_text

VERSION_HEADING_LEVEL = 2
TEXT = "text"


def inline_runs(
    children: Sequence[Mapping[str, Any]],
) -> list[list[Mapping[str, Any]]]:
    """Group inline tokens into runs, merging adjacent plain-text tokens.

    The markdown tokenizer splits text around characters such as ``[`` that
    failed to open a link, so ``[1.0.0]`` arrives as several text tokens
    forming a single run.
    """
    runs: list[list[Mapping[str, Any]]] = []
    for child in children:
        if child["type"] == TEXT and runs and runs[-1][-1]["type"] == TEXT:
            runs[-1].append(child)
        else:
            runs.append([child])
    return runs


def heading_text(block: Block) -> str:
    """Render the single inline run of a level 2 heading to plain text.

    Raises:
        VersionParseError: ``HEADER``, ``SINGLE_SPAN`` or ``UTF8``.
    """
    if block.heading_level != VERSION_HEADING_LEVEL:
        raise VersionParseError(ErrorKind.HEADER)

    runs = inline_runs(block.children)
    if len(runs) != 1:
        raise VersionParseError(ErrorKind.SINGLE_SPAN)

    text = render_inline_text(runs[0])
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise VersionParseError(ErrorKind.UTF8, text=text) from exc
    return text


def classify_block(block: Block) -> Version:
    """Classify a block as a version heading.

    Raises:
        VersionParseError: If the block is not a version heading.
    """
    text = heading_text(block)
    try:
        return parse_version(text)
    except GrammarError as exc:
        raise VersionParseError.format(text, exc) from exc


def is_version_heading(block: Block) -> bool:
    try:
        classify_block(block)
    except VersionParseError:
        return False
    return True
