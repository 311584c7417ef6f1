"""
Console output for quote listings and author counts.
"""

from rich.console import Console

from quotes.constants import TOTAL_LABEL
from quotes.core.collection import count_report, render
from quotes.models import Quote

console = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


def _write(text: str) -> None:
    # Straight to the console stream: Console.print expands tabs and drops control characters
    console.file.write(text)


def print_list(quotes: list[Quote], show_line_numbers: bool = False) -> None:
    """
    Prints every quote followed by a blank line.

    Args:
        quotes: Quotes to print.
        show_line_numbers: Print each quote's starting line after its dialogue.
    """
    for quote in quotes:
        if show_line_numbers:
            _write(render(quote, show_line_number=True) + "\n\n")
        else:
            _write(render(quote) + "\n")


def print_lengths(quotes: list[Quote]) -> None:
    """Prints the number of quotes per author in sorted order, then the total."""
    report = count_report(quotes)
    for author, count in report.rows:
        _write(f"{author}: {count}\n")
    _write(f"{TOTAL_LABEL}: {report.total}\n")
