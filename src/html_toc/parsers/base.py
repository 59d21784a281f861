# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParseResult


class TocParser(ABC):
    @abstractmethod
    def parse(self, html: str) -> ParseResult:
        """
        Scan markup and return its table of contents.

        Requirements:
        - Deterministic output for same input
        - Never raises on malformed markup
        - Original input is returned unchanged
        """
        raise NotImplementedError
