"""Core type definitions."""

from dataclasses import dataclass
from enum import Enum, auto


class ElementKind(Enum):
    """Kinds of HTML elements a line can render to."""

    PARAGRAPH = auto()
    HEADER1 = auto()
    HEADER2 = auto()
    HEADER3 = auto()
    HEADER4 = auto()
    HEADER5 = auto()
    HEADER6 = auto()
    UNDERSCORE = auto()
    EMPHASIZE = auto()
    STRONG = auto()
    LINK = auto()
    HORIZONTAL_RULE = auto()


@dataclass(frozen=True)
class MatchRule:
    """Literal line marker mapped to the element kind it introduces."""

    marker: str
    kind: ElementKind

    def __post_init__(self) -> None:
        if not self.marker:
            raise ValueError("MatchRule.marker must be a non-empty string")
