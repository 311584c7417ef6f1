"""
Operations over a parsed quote collection.

Filtering, per-author counting and the text renderings used by the console
and the writer.
"""

from collections import Counter
from dataclasses import dataclass

from quotes.models import Quote


def search(quotes: list[Quote], term: str, by_author: bool) -> list[Quote]:
    """
    Filters quotes by a case-insensitive substring.

    Args:
        quotes: Quotes to filter.
        term: Substring to look for.
        by_author: Match authors if True, otherwise phrase text.

    Returns:
        Matching quotes in their original order.
    """
    return [q for q in quotes if q.contains(term, by_author)]


def author_counts(quotes: list[Quote]) -> Counter[str]:
    """
    Counts the quotes each author speaks in.

    An author speaking several times in one quote is counted once for it.
    """
    counts: Counter[str] = Counter()
    for quote in quotes:
        counts.update(quote.authors)
    return counts


@dataclass
class AuthorCountReport:
    """Per-author counts sorted by author name, and their sum."""
    rows: list[tuple[str, int]]
    total: int


def count_report(quotes: list[Quote]) -> AuthorCountReport:
    counts = author_counts(quotes)
    rows = sorted(counts.items())
    return AuthorCountReport(rows=rows, total=sum(count for _, count in rows))


def render(quote: Quote, show_line_number: bool = False) -> str:
    """
    Renders a quote as one '"<text>" - <author>' line per phrase.

    Args:
        quote: Quote to render.
        show_line_number: Append the 1-based starting line after the dialogue.

    Returns:
        Newline-terminated phrase lines, followed by the line number if requested.
    """
    text = str(quote)
    if show_line_number:
        text += str(quote.line_number)
    return text


def serialize_for_write(quotes: list[Quote]) -> list[str]:
    """
    Lines to append to an output file: each quote's phrases then a blank line.

    Lines carry no terminator.
    """
    lines = []
    for quote in quotes:
        lines.extend(str(phrase) for phrase in quote.dialogue)
        lines.append("")
    return lines
