"""
Append-only output of quotes to a text file.
"""

from pathlib import Path

from loguru import logger

from quotes.core.collection import serialize_for_write
from quotes.models import Quote


class MissingOutputPathError(ValueError):
    """Raised when quotes are written without a destination."""


def write_quotes(quotes: list[Quote], path: str | Path | None) -> int:
    """
    Appends quotes to a file, creating it if absent.

    Existing content is never overwritten.

    Args:
        quotes: Quotes to write.
        path: Destination file.

    Returns:
        Number of quotes written.

    Raises:
        MissingOutputPathError: If no path is given.
        OSError: If the file cannot be opened or written.
    """
    if path is None or str(path) == "":
        raise MissingOutputPathError("No output file given for writing quotes")

    path = Path(path)
    with path.open("a", encoding="utf-8") as fh:
        for line in serialize_for_write(quotes):
            fh.write(f"{line}\n")

    logger.info(f"Appended {len(quotes)} quotes to {path}")
    return len(quotes)
