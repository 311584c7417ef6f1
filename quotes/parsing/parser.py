"""
Quote Parser Class.

Runs the block segmenter and the phrase tokenizer over a whole file.
"""

from loguru import logger

from quotes.config.models import ParserConfig
from quotes.constants import LINE_JOIN_DELIMITER
from quotes.models import Quote
from .patterns import DelimiterSet
from .segmenter import BlockSegmenter
from .tokenizer import PhraseTokenizer, UnpairedHook, log_unpaired


class QuoteParser:
    """
    Converts quote file contents into structured Quote records.

    The line-join delimiter used by the segmenter is always part of the
    tokenizer's delimiter set.
    """
    def __init__(
        self,
        single_line_break: bool = False,
        line_delimiter: str = LINE_JOIN_DELIMITER,
        extra_delimiters: list[str] | None = None,
        on_unpaired: UnpairedHook | None = None,
    ):
        """
        Args:
            single_line_break: End a block at every line break instead of at blank lines.
            line_delimiter: Marker joining the lines of one block.
            extra_delimiters: Additional literal boundaries for the tokenizer.
            on_unpaired: Hook called with each dropped trailing token.
        """
        delimiters = DelimiterSet.default(line_join=line_delimiter)
        if extra_delimiters:
            delimiters = delimiters.with_extra(*extra_delimiters)
        self.segmenter = BlockSegmenter(single_line_break, line_delimiter)
        self.tokenizer = PhraseTokenizer(delimiters, on_unpaired)

    @classmethod
    def from_config(cls, config: ParserConfig, single_line_break: bool | None = None) -> "QuoteParser":
        """
        Builds a parser from the [parser] configuration section.

        Args:
            config: Parser configuration.
            single_line_break: Overrides config.single_line_break when not None.
        """
        if single_line_break is None:
            single_line_break = config.single_line_break
        return cls(
            single_line_break=single_line_break,
            line_delimiter=config.line_delimiter,
            extra_delimiters=config.extra_delimiters,
            on_unpaired=log_unpaired if config.warn_unpaired else None,
        )

    def parse(self, contents: str) -> list[Quote]:
        quotes = [
            Quote.from_block(block.text, block.line_number, self.tokenizer)
            for block in self.segmenter.segment(contents)
        ]
        logger.debug(f"Parsed {len(quotes)} quotes")
        return quotes


def parse(contents: str, single_line_break: bool = False) -> list[Quote]:
    """
    Parse quote file contents with the default delimiters.

    Returns:
        Quotes in file order.
    """
    return QuoteParser(single_line_break=single_line_break).parse(contents)
