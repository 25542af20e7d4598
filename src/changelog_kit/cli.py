"""Command-line interface for changelog-kit."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .extraction.config import ExtractionConfig, load_config
from .extraction.extractor import (
    ChangelogNotFoundError,
    format_entries,
    load_changelog,
    select_entries,
)
from .observability.base import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

EXIT_NOT_FOUND = 1
EXIT_NO_MATCH = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="changelog-kit",
        description="Extract release sections from a Keep a Changelog document.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "path", nargs="?", help="Changelog file (default: CHANGELOG.md)"
    )
    parser.add_argument("--config", help="YAML file with extraction settings")
    parser.add_argument(
        "--select",
        help="all, latest, latest-released, unreleased or a version such as 1.2.3",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("text", "html", "json"),
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--plugin",
        dest="plugins",
        action="append",
        help="Enable a mistune plugin, e.g. table or strikethrough (repeatable).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    return parser


def resolve_config(args: argparse.Namespace) -> ExtractionConfig:
    """Command-line flags override the config file, which overrides defaults."""
    config = load_config(args.config) if args.config else ExtractionConfig()
    overrides = {
        key: value
        for key, value in (
            ("path", Path(args.path) if args.path else None),
            ("select", args.select),
            ("output_format", args.output_format),
            ("plugins", args.plugins),
        )
        if value is not None
    }
    return ExtractionConfig(**{**config.model_dump(), **overrides})


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)
    metrics_hook: MetricsHook = (
        LoggingMetricsHook() if args.verbose else NoOpMetricsHook()
    )

    try:
        config = resolve_config(args)
    except (OSError, ValidationError) as exc:
        parser.error(str(exc))

    try:
        entries = load_changelog(
            config.path, plugins=config.plugins, metrics_hook=metrics_hook
        )
        selected = select_entries(entries, config.select)
    except OSError as exc:
        print(f"Cannot read {config.path}: {exc.strerror}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except ChangelogNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_NOT_FOUND
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return EXIT_NO_MATCH
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("Selected %d of %d entries", len(selected), len(entries))
    print(format_entries(selected, config.output_format))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
