"""Element kind to HTML tag mapping."""

from collections.abc import Mapping
from types import MappingProxyType

from markline.core.types import ElementKind

_DEFAULT_TAGS: dict[ElementKind, str] = {
    ElementKind.PARAGRAPH: "p",
    ElementKind.HEADER1: "h1",
    ElementKind.HEADER2: "h2",
    ElementKind.HEADER3: "h3",
    ElementKind.HEADER4: "h4",
    ElementKind.HEADER5: "h5",
    ElementKind.HEADER6: "h6",
    ElementKind.UNDERSCORE: "u",
    ElementKind.EMPHASIZE: "em",
    ElementKind.STRONG: "strong",
    ElementKind.LINK: "a",
    ElementKind.HORIZONTAL_RULE: "hr",
}

FALLBACK_TAG = "p"


class TagCatalog:
    """Read-only lookup of HTML tags by element kind.

    Kinds missing from the table resolve to the paragraph tag instead of
    raising, so every line still renders to a well-formed tag pair.
    """

    def __init__(self, tags: Mapping[ElementKind, str] | None = None) -> None:
        """Initialize catalog.

        Args:
            tags: Kind to tag name mapping (default: the standard HTML tags)
        """
        self._tags = MappingProxyType(dict(_DEFAULT_TAGS if tags is None else tags))

    def tag_name(self, kind: ElementKind) -> str:
        """Return the bare tag name for a kind, falling back to ``p``."""
        return self._tags.get(kind, FALLBACK_TAG)

    def opening_tag(self, kind: ElementKind) -> str:
        return f"<{self.tag_name(kind)}>"

    def closing_tag(self, kind: ElementKind) -> str:
        return f"</{self.tag_name(kind)}>"

    def wrap(self, kind: ElementKind, text: str) -> str:
        """Render text as a single element of the given kind.

        Args:
            kind: Element kind to render
            text: Residual line content, used verbatim

        Returns:
            Opening tag, text and closing tag concatenated
        """
        return f"{self.opening_tag(kind)}{text}{self.closing_tag(kind)}"


DEFAULT_TAG_CATALOG = TagCatalog()
