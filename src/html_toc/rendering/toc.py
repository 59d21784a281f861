# rendering/toc.py

import logging

from pydantic import BaseModel, ConfigDict

from html_toc.observability import names
from html_toc.observability.base import MetricsHook, NoOpMetricsHook
from html_toc.parsers.escaping import escape_attribute
from html_toc.parsers.models import ParseResult
from html_toc.parsers.slug import heading_text

logger = logging.getLogger(__name__)

TOC_CLASS = "content-toc"


class TocEntry(BaseModel):
    id: str
    text: str
    href: str

    model_config = ConfigDict(extra="forbid", frozen=True)


def toc_entries(result: ParseResult) -> list[TocEntry]:
    """One entry per section heading, in document order, duplicates included."""
    return [
        TocEntry(id=h.id, text=heading_text(h.text), href=f"#{h.id}")
        for h in result.headings
    ]


def render_toc(
    result: ParseResult,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """
    Render the table of contents as a list of links to the injected anchors.

    Returns an empty string when the document has no section headings.
    """
    entries = toc_entries(result)
    if not entries:
        logger.debug("No headings, skipping TOC rendering")
        return ""

    lines = [f'<ul class="{TOC_CLASS}">']
    for entry in entries:
        lines.append(
            f'<li><a href="{escape_attribute(entry.href)}">'
            f"{escape_attribute(entry.text)}</a></li>"
        )
    lines.append("</ul>")

    metrics_hook.increment(names.TOC_RENDER_TOTAL)
    return "\n".join(lines)
