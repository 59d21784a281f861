# parsers/models.py

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Heading:
    id: str
    text: str


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a single parse. Immutable.

    - original: caller's input, untouched
    - content: input with an anchor marker before every section heading
    - pure_content: content without the title heading element
    - title / perex: raw inner HTML, or None when the element is absent
    - headings: every section heading in document order, collisions kept
    """

    original: str
    content: str
    pure_content: str
    title: str | None
    perex: str | None
    headings: tuple[Heading, ...]
    _items: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        items: dict[str, str] = {}
        for heading in self.headings:
            # Duplicate ids keep the first position, the later text wins
            items[heading.id] = heading.text
        object.__setattr__(self, "_items", MappingProxyType(items))

    @property
    def items(self) -> Mapping[str, str]:
        return self._items

    def __str__(self) -> str:
        return self.content
