# parsers/slug.py

import html
import re
import unicodedata

_TAG_RE = re.compile(r"""<(?:[^<>"']|"[^"<]*"|'[^'<]*')*>""")
_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    URL-safe identifier for heading text.

    - Diacritics are folded to their ASCII base letter
    - Non-ASCII punctuation and symbols act as separators
    - Runs of anything outside [a-z0-9] become one hyphen
    - Leading and trailing hyphens are trimmed
    - May return an empty string
    """
    normalized = unicodedata.normalize("NFKD", text)
    normalized = "".join(
        c if c.isascii() or unicodedata.category(c)[0] in "LN" else " "
        for c in normalized
        if not unicodedata.combining(c)
    )
    normalized = normalized.encode("ascii", "ignore").decode("ascii").lower()
    return _SEPARATOR_RE.sub("-", normalized).strip("-")


def heading_text(raw: str) -> str:
    """Plain text of a heading's inner HTML: tags dropped, entities decoded."""
    text = html.unescape(_TAG_RE.sub("", raw))
    return _WHITESPACE_RE.sub(" ", text).strip()


def heading_id(raw: str) -> str:
    return slugify(heading_text(raw))
