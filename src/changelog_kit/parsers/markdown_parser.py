# parsers/markdown_parser.py

import logging
from collections.abc import Sequence
from time import monotonic
from typing import BinaryIO

import mistune

from changelog_kit.observability import names
from changelog_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .models import Block

logger = logging.getLogger(__name__)

SKIPPED_TOKENS = frozenset({"blank_line"})


class MarkdownParser(DocumentParser):
    """
    Deterministic markdown parser.
    - Uses mistune's AST mode, one Block per top-level token
    - Decodes UTF-8 with surrogateescape so bad bytes stay local to their block
    - Drops blank-line separators
    """

    def __init__(
        self,
        plugins: Sequence[str] = (),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.plugins = list(plugins)
        self.metrics_hook = metrics_hook
        self._markdown = mistune.create_markdown(renderer="ast", plugins=self.plugins)

    def parse(self, source: BinaryIO) -> list[Block]:
        text = source.read().decode("utf-8-sig", errors="surrogateescape")
        return self.parse_text(text)

    def parse_text(self, text: str) -> list[Block]:
        start = monotonic()
        tokens = self._markdown(text)
        blocks = [
            Block(token) for token in tokens if token["type"] not in SKIPPED_TOKENS
        ]

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSER_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSER_BLOCKS_TOTAL, len(blocks))
        logger.debug("Parsed %d blocks in %.1fms", len(blocks), elapsed_ms)
        return blocks
