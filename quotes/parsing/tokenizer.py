"""
Phrase tokenizer.

Splits one block into alternating text and author tokens and pairs them up.
"""

from typing import Callable

from loguru import logger

from quotes.models import Phrase
from .patterns import DEFAULT_DELIMITERS, DelimiterSet

UnpairedHook = Callable[[str, str], None]
"""Called with (dropped_token, block_text) when a block has an odd token count"""


def log_unpaired(token: str, block_text: str) -> None:
    """Unpaired-token hook that logs a warning."""
    logger.warning(f"Dropped unpaired token {token!r} from block {block_text!r}")


class PhraseTokenizer:
    """
    Tokenizes quote blocks into phrases.

    Any boundary in the delimiter set separates tokens. Tokens are paired in
    order as (text, author); a trailing token without a partner is dropped.
    """
    def __init__(
        self,
        delimiters: DelimiterSet | None = None,
        on_unpaired: UnpairedHook | None = None,
    ):
        """
        Args:
            delimiters: Boundary set; the default quotes/dashes/line-join set if omitted.
            on_unpaired: Optional hook called with each dropped trailing token.
        """
        self.delimiters = delimiters or DEFAULT_DELIMITERS
        self.on_unpaired = on_unpaired

    def split(self, block_text: str) -> list[str]:
        """Returns the trimmed, non-empty tokens of a block."""
        tokens = []
        for fragment in self.delimiters.split(block_text):
            fragment = fragment.strip()
            if fragment:
                tokens.append(fragment)
        return tokens

    def tokenize(self, block_text: str) -> list[Phrase]:
        tokens = self.split(block_text)
        num_phrases = len(tokens) // 2
        dialogue = [
            Phrase(text=tokens[i * 2], author=tokens[i * 2 + 1])
            for i in range(num_phrases)
        ]
        if len(tokens) % 2 and self.on_unpaired is not None:
            self.on_unpaired(tokens[-1], block_text)
        return dialogue


def tokenize(block_text: str) -> list[Phrase]:
    """Tokenizes a block with the default delimiter set."""
    return PhraseTokenizer().tokenize(block_text)
