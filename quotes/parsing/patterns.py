"""
Delimiter patterns for splitting quote blocks into phrase and author tokens.

The tokenizer treats any recognized punctuation boundary as a separator and
relies on strict text/author alternation to rebuild the structure. Boundaries
are literals tried in order at each position, so longer forms such as '"-'
must come before their prefixes.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from quotes.constants import LINE_JOIN_DELIMITER


class Boundary(Enum):
    """Recognized phrase/author boundaries, in match priority order."""
    QUOTE_DASH = '"-'
    RIGHT_CURLY_DASH = "”-"
    STRAIGHT_QUOTE = '"'
    LEFT_CURLY_QUOTE = "“"
    RIGHT_CURLY_QUOTE = "”"
    SPACE_DASH = " -"
    LINE_JOIN = LINE_JOIN_DELIMITER
    NEWLINE = "\n"


TEXT_KIND = "text"
EXTRA_KIND = "extra"


@dataclass(frozen=True)
class Token:
    """A classified slice of block text: either a boundary or the text between boundaries."""
    kind: str
    value: str

    @property
    def is_boundary(self) -> bool:
        return self.kind != TEXT_KIND


@dataclass(frozen=True)
class DelimiterSet:
    """
    Ordered set of literal boundaries compiled into a single alternation.

    Attributes:
        boundaries: (kind, literal) pairs in match priority order.
    """
    boundaries: tuple[tuple[str, str], ...]
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.boundaries:
            raise ValueError("DelimiterSet needs at least one boundary")
        if any(not literal for _, literal in self.boundaries):
            raise ValueError("Boundaries must be non-empty literals")
        alternation = "|".join(f"({re.escape(literal)})" for _, literal in self.boundaries)
        object.__setattr__(self, "pattern", re.compile(alternation))

    @classmethod
    def default(cls, line_join: str = LINE_JOIN_DELIMITER) -> "DelimiterSet":
        """
        Builds the standard set of straight/curly quotes, dashes and line joins.

        Args:
            line_join: Line-join delimiter used by the segmenter.
        """
        boundaries = []
        for boundary in Boundary:
            literal = line_join if boundary is Boundary.LINE_JOIN else boundary.value
            boundaries.append((boundary.name, literal))
        return cls(tuple(boundaries))

    def with_extra(self, *literals: str) -> "DelimiterSet":
        """Returns a new set with additional literal boundaries appended."""
        extra = tuple((EXTRA_KIND, literal) for literal in literals)
        return DelimiterSet(self.boundaries + extra)

    @property
    def literals(self) -> list[str]:
        return [literal for _, literal in self.boundaries]

    def scan(self, text: str) -> Iterator[Token]:
        """
        Classifies text into boundary and text tokens.

        Text tokens are yielded untrimmed and may be empty between two
        adjacent boundaries.

        Args:
            text: Block text to classify.

        Yields:
            Token objects covering the whole input in order.
        """
        pos = 0
        for match in self.pattern.finditer(text):
            yield Token(TEXT_KIND, text[pos:match.start()])
            kind, _ = self.boundaries[match.lastindex - 1]
            yield Token(kind, match.group(0))
            pos = match.end()
        yield Token(TEXT_KIND, text[pos:])

    def split(self, text: str) -> list[str]:
        """Returns the raw fragments between boundaries."""
        return [token.value for token in self.scan(text) if not token.is_boundary]


DEFAULT_DELIMITERS = DelimiterSet.default()
