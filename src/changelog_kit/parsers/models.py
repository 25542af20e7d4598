# parsers/models.py

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

HEADING = "heading"


@dataclass(frozen=True)
class Block:
    """One top-level unit of a parsed document.

    Wraps a mistune AST token without copying it. Consumers that only pass
    content through never need to look inside ``token``.
    """

    token: Mapping[str, Any]

    @property
    def type(self) -> str:
        return self.token["type"]

    @property
    def heading_level(self) -> int | None:
        if self.type != HEADING:
            return None
        return self.token.get("attrs", {}).get("level")

    @property
    def children(self) -> Sequence[Mapping[str, Any]]:
        return self.token.get("children", ())
