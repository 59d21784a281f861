from .toc import TocEntry, render_toc, toc_entries

__all__ = [
    "TocEntry",
    "render_toc",
    "toc_entries",
]
