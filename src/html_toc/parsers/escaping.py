# parsers/escaping.py

from .constants import ANCHOR_CLASS, ANCHOR_TAG

_ATTRIBUTE_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)


def escape_attribute(value: str) -> str:
    """Escape a value for a quoted HTML attribute."""
    return value.translate(_ATTRIBUTE_ESCAPES)


def anchor_marker(anchor_id: str) -> str:
    return (
        f'<{ANCHOR_TAG} id="{escape_attribute(anchor_id)}" '
        f'class="{ANCHOR_CLASS}"></{ANCHOR_TAG}>'
    )
