"""
Data containers for parsed quotes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from quotes.constants import PHRASE_TEMPLATE

if TYPE_CHECKING:
    from quotes.parsing.tokenizer import PhraseTokenizer


@dataclass(frozen=True)
class Phrase:
    """
    One utterance attributed to one speaker.

    Attributes:
        text: Trimmed spoken text.
        author: Trimmed speaker name.
    """
    text: str
    author: str

    def __str__(self) -> str:
        return PHRASE_TEMPLATE.format(text=self.text, author=self.author)


@dataclass(frozen=True)
class RawBlock:
    """A segmented block of source text and the 1-based line it starts on."""
    text: str
    line_number: int


@dataclass(frozen=True)
class Quote:
    """
    One parsed block, possibly holding a multi-speaker dialogue.

    Attributes:
        line_number: 1-based line of the first line of the source block.
        dialogue: Phrases in order of appearance.
    """
    line_number: int
    dialogue: tuple[Phrase, ...] = ()

    @classmethod
    def from_block(
        cls,
        block_text: str,
        line_number: int,
        tokenizer: PhraseTokenizer | None = None,
    ) -> Quote:
        """
        Builds a quote by tokenizing a raw block.

        Args:
            block_text: Block text with lines joined by the line-join delimiter.
            line_number: 1-based starting line of the block.
            tokenizer: Tokenizer to use; the default delimiter set if omitted.

        Returns:
            The parsed Quote.
        """
        if tokenizer is None:
            from quotes.parsing.tokenizer import PhraseTokenizer
            tokenizer = PhraseTokenizer()
        return cls(line_number=line_number, dialogue=tuple(tokenizer.tokenize(block_text)))

    @property
    def authors(self) -> set[str]:
        """Distinct authors speaking in this quote."""
        return {phrase.author for phrase in self.dialogue}

    def contains(self, term: str, by_author: bool) -> bool:
        """
        Case-insensitive substring match against the author or text of any phrase.

        Args:
            term: Search term.
            by_author: Match against authors if True, otherwise against text.

        Returns:
            True if at least one phrase matches.
        """
        needle = term.lower()
        for phrase in self.dialogue:
            field = phrase.author if by_author else phrase.text
            if needle in field.lower():
                return True
        return False

    def __str__(self) -> str:
        return "".join(f"{phrase}\n" for phrase in self.dialogue)
