# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers.html_parser import HtmlTocParser, parse
from .parsers.models import Heading, ParseResult
from .parsers.slug import slugify

# Rendering
from .rendering import TocEntry, render_toc, toc_entries

__all__ = [
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Heading",
    "HtmlTocParser",
    "ParseResult",
    "parse",
    "slugify",
    # Rendering
    "TocEntry",
    "render_toc",
    "toc_entries",
]
