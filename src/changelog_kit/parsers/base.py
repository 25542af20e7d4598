# parsers/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import Block


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: BinaryIO) -> list[Block]:
        """
        Parse a document into its top-level blocks, in document order.

        Requirements:
        - Deterministic output for same input
        - Undecodable bytes must not abort parsing
        - Blank separators are not blocks
        """
        raise NotImplementedError

    @abstractmethod
    def parse_text(self, text: str) -> list[Block]:
        raise NotImplementedError
