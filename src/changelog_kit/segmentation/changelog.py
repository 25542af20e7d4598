# segmentation/changelog.py

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from time import monotonic

from changelog_kit.grammar.errors import ErrorKind, VersionParseError
from changelog_kit.grammar.version import Version
from changelog_kit.observability import names
from changelog_kit.observability.base import MetricsHook, NoOpMetricsHook
from changelog_kit.parsers.models import Block

from .classifier import classify_block

logger = logging.getLogger(__name__)

Classifier = Callable[[Block], Version]


@dataclass(frozen=True)
class ChangelogEntry:
    """One release section: its version and the blocks under its heading."""

    version: Version
    blocks: list[Block]


class _State(Enum):
    SEEKING = "seeking"
    GROUPING = "grouping"
    DONE = "done"


class Changelog(Iterator[ChangelogEntry]):
    """Lazy, forward-only grouping of blocks into changelog entries.

    Construction skips everything before the first version heading. Each
    ``next()`` then drains blocks up to the following version heading, so
    only the entry being built is ever held in memory.

    Blocks that fail classification are never errors: before the first
    heading they are preamble, afterwards they are entry content.
    """

    def __init__(
        self,
        blocks: Iterable[Block],
        *,
        classifier: Classifier = classify_block,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._blocks = iter(blocks)
        self._classifier = classifier
        self.metrics_hook = metrics_hook
        self._state = _State.SEEKING
        self._current: Version | None = None
        self._seek()

    @classmethod
    def from_blocks(
        cls,
        blocks: Iterable[Block],
        *,
        classifier: Classifier = classify_block,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "Changelog | None":
        """Return a ready segmenter, or ``None`` if no version heading exists."""
        changelog = cls(blocks, classifier=classifier, metrics_hook=metrics_hook)
        if changelog.exhausted:
            return None
        return changelog

    @property
    def exhausted(self) -> bool:
        return self._state is _State.DONE

    def __iter__(self) -> "Changelog":
        return self

    def __next__(self) -> ChangelogEntry:
        if self._state is not _State.GROUPING or self._current is None:
            raise StopIteration

        start = monotonic()
        version = self._current
        contents: list[Block] = []
        for block in self._blocks:
            next_version = self._classify(block)
            if next_version is not None:
                self._current = next_version
                return self._emit(version, contents, start)
            contents.append(block)

        self._current = None
        self._state = _State.DONE
        return self._emit(version, contents, start)

    def _seek(self) -> None:
        for block in self._blocks:
            version = self._classify(block)
            if version is not None:
                logger.debug("First version heading: %s", version)
                self._current = version
                self._state = _State.GROUPING
                return
            self.metrics_hook.increment(names.SEGMENTATION_BLOCKS_SKIPPED)

        logger.debug("No version heading found")
        self._state = _State.DONE

    def _classify(self, block: Block) -> Version | None:
        try:
            return self._classifier(block)
        except VersionParseError as exc:
            # Ordinary content is HEADER; anything else was a level 2 heading.
            if exc.kind is not ErrorKind.HEADER:
                logger.debug("Not a version heading (%s): %r", exc, exc.text)
                self.metrics_hook.increment(
                    names.SEGMENTATION_HEADINGS_REJECTED,
                    labels={"kind": exc.kind.value},
                )
            return None

    def _emit(
        self, version: Version, contents: list[Block], start: float
    ) -> ChangelogEntry:
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SEGMENTATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SEGMENTATION_ENTRIES_TOTAL)
        self.metrics_hook.record_gauge(names.SEGMENTATION_ENTRY_SIZE, len(contents))
        return ChangelogEntry(version=version, blocks=contents)
