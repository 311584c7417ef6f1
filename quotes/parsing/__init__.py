"""
Quote parsing submodule.
"""

from .parser import QuoteParser, parse
from .patterns import Boundary, DelimiterSet, Token
from .segmenter import BlockSegmenter, segment
from .tokenizer import PhraseTokenizer, tokenize

__all__ = [
    "Boundary",
    "BlockSegmenter",
    "DelimiterSet",
    "PhraseTokenizer",
    "QuoteParser",
    "Token",
    "parse",
    "segment",
    "tokenize",
]
