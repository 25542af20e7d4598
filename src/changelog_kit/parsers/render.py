# parsers/render.py

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import mistune
from mistune.core import BlockState

from .models import Block

LINE_BREAKS = frozenset({"linebreak", "softbreak"})
LIST_ITEM = "list_item"


def render_inline_text(tokens: Sequence[Mapping[str, Any]]) -> str:
    """Concatenate the plain text of an inline token tree."""
    parts: list[str] = []
    for token in tokens:
        if token["type"] in LINE_BREAKS:
            parts.append("\n")
        elif "raw" in token:
            parts.append(token["raw"])
        elif "children" in token:
            parts.append(render_inline_text(token["children"]))
    return "".join(parts)


def _render_token_text(token: Mapping[str, Any], depth: int) -> list[str]:
    if token["type"] == LIST_ITEM:
        lines: list[str] = []
        for child in token.get("children", ()):
            lines.extend(_render_token_text(child, depth + 1))
        if lines:
            lines[0] = "  " * depth + "- " + lines[0].lstrip()
        return lines
    if token["type"] == "list":
        lines = []
        for item in token.get("children", ()):
            lines.extend(_render_token_text(item, depth))
        return lines
    if "raw" in token:
        return token["raw"].rstrip("\n").splitlines()
    return render_inline_text(token.get("children", ())).splitlines()


def render_text(blocks: Iterable[Block]) -> str:
    """Render blocks as plain text, one paragraph per block."""
    return "\n\n".join(
        "\n".join(_render_token_text(block.token, 0)) for block in blocks
    )


def render_html(blocks: Iterable[Block], escape: bool = True) -> str:
    renderer = mistune.HTMLRenderer(escape=escape)
    tokens = [dict(block.token) for block in blocks]
    return renderer(tokens, BlockState())
