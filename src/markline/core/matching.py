"""Prioritized line marker matching.

A line is tested against each rule's literal marker in order. The first rule
whose marker prefixes the line wins; its marker is stripped and the remainder
is wrapped in the rule's element tags. Lines matching no rule render as
paragraphs.
"""

from collections.abc import Iterable

from markline.core.tags import DEFAULT_TAG_CATALOG, TagCatalog
from markline.core.types import ElementKind, MatchRule

# Highest priority first
DEFAULT_RULES: tuple[MatchRule, ...] = (
    MatchRule("# ", ElementKind.HEADER1),
    MatchRule("## ", ElementKind.HEADER2),
    MatchRule("### ", ElementKind.HEADER3),
    MatchRule("#### ", ElementKind.HEADER4),
    MatchRule("##### ", ElementKind.HEADER5),
    MatchRule("###### ", ElementKind.HEADER6),
    MatchRule("---", ElementKind.HORIZONTAL_RULE),
    MatchRule("* ", ElementKind.EMPHASIZE),
    MatchRule("** ", ElementKind.STRONG),
    MatchRule("! ", ElementKind.LINK),
    MatchRule("~~ ", ElementKind.UNDERSCORE),
)


def try_strip(line: str, marker: str) -> tuple[bool, str]:
    """Strip a literal marker from the start of a line.

    Args:
        line: Line to test
        marker: Literal, case-sensitive prefix

    Returns:
        ``(True, remainder)`` with exactly ``len(marker)`` characters removed
        when the line starts with the marker, otherwise ``(False, line)``.
        An empty line never matches.
    """
    if not line or not line.startswith(marker):
        return False, line
    return True, line[len(marker):]


class MatchChain:
    """Ordered rule list with a paragraph fallback."""

    def __init__(
        self,
        rules: Iterable[MatchRule] = DEFAULT_RULES,
        *,
        catalog: TagCatalog = DEFAULT_TAG_CATALOG,
        fallback: ElementKind = ElementKind.PARAGRAPH,
    ) -> None:
        """Initialize chain.

        Args:
            rules: Rules in priority order, highest first
            catalog: Tag catalog used to wrap matched lines
            fallback: Kind used when no rule matches
        """
        self._rules = tuple(rules)
        self._catalog = catalog
        self._fallback = fallback

    @property
    def rules(self) -> tuple[MatchRule, ...]:
        return self._rules

    def classify(self, line: str) -> tuple[ElementKind, str]:
        """Return the winning kind for a line and the marker-stripped text."""
        for rule in self._rules:
            matched, remainder = try_strip(line, rule.marker)
            if matched:
                return rule.kind, remainder
        return self._fallback, line

    def render(self, line: str) -> str:
        """Render one line as exactly one HTML fragment."""
        kind, text = self.classify(line)
        return self._catalog.wrap(kind, text)


DEFAULT_CHAIN = MatchChain()
