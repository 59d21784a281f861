# parsers/html_parser.py

import logging
import re
from time import monotonic

from html_toc.observability import names
from html_toc.observability.base import MetricsHook, NoOpMetricsHook

from .base import TocParser
from .constants import PEREX_TAG, SECTION_TAG, TITLE_TAG
from .escaping import anchor_marker
from .models import Heading, ParseResult
from .slug import heading_id

logger = logging.getLogger(__name__)


def _element_pattern(tag: str) -> re.Pattern[str]:
    """
    Match `<tag attrs>inner</tag>`, capturing the inner HTML.

    The attribute run keeps quoted values whole and stops at the next `<`.
    The inner run stops at the next opening or closing tag of the same kind,
    so a failed attempt never scans past the following tag of that kind.
    Matching stays linear on unclosed or otherwise broken markup.
    """
    return re.compile(
        rf"""<{tag}\b(?:[^<>"']|"[^"<]*"|'[^'<]*')*>"""
        rf"([^<]*(?:<(?!/?{tag}\b)[^<]*)*)"
        rf"</{tag}\s*>",
        re.IGNORECASE,
    )


_SECTION_RE = _element_pattern(SECTION_TAG)
_TITLE_RE = _element_pattern(TITLE_TAG)
_PEREX_RE = _element_pattern(PEREX_TAG)


class HtmlTocParser(TocParser):
    """
    Pattern-based table of contents extractor.
    - Single pass over the input per element kind
    - Unrecognized or broken markup passes through untouched
    - Stateless apart from the metrics hook, safe to share across threads
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, html: str) -> ParseResult:
        if not isinstance(html, str):
            raise TypeError(f"Expected str, got {type(html).__name__}")

        start = monotonic()

        content, headings = self._inject_anchors(html)
        title = self._first_inner(_TITLE_RE, html)
        perex = self._first_inner(_PEREX_RE, html)
        pure_content = _TITLE_RE.sub("", content, count=1)

        result = ParseResult(
            original=html,
            content=content,
            pure_content=pure_content,
            title=title,
            perex=perex,
            headings=headings,
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.TOC_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.TOC_PARSE_TOTAL)
        self.metrics_hook.record_gauge(names.TOC_HEADINGS_FOUND, len(headings))
        self.metrics_hook.record_gauge(names.TOC_INPUT_LENGTH, len(html))
        if title is None:
            self.metrics_hook.increment(names.TOC_TITLE_MISSING_TOTAL)
        if perex is None:
            self.metrics_hook.increment(names.TOC_PEREX_MISSING_TOTAL)

        logger.info(
            "Parsed TOC: headings=%d, title=%s, perex=%s, latency=%.1fms",
            len(headings),
            title is not None,
            perex is not None,
            elapsed_ms,
        )
        return result

    def _inject_anchors(self, html: str) -> tuple[str, tuple[Heading, ...]]:
        headings: list[Heading] = []

        def replace(match: re.Match[str]) -> str:
            text = match.group(1)
            heading = Heading(id=heading_id(text), text=text)
            headings.append(heading)
            logger.debug(
                "Found heading: id=%r at offset %d", heading.id, match.start()
            )
            return anchor_marker(heading.id) + match.group(0)

        # re.sub rewrites in one pass against the original offsets
        content = _SECTION_RE.sub(replace, html)
        return content, tuple(headings)

    def _first_inner(self, pattern: re.Pattern[str], html: str) -> str | None:
        match = pattern.search(html)
        if match is None:
            return None
        return match.group(1)


_default_parser = HtmlTocParser()


def parse(html: str) -> ParseResult:
    """Parse with a shared, metrics-free parser."""
    return _default_parser.parse(html)
