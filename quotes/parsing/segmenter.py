"""
Block segmenter.

Groups the lines of a quote file into blocks. A block ends when a non-blank
line follows a blank line, or at every line break in single-line-break mode.
"""

from dataclasses import dataclass, field
from typing import Iterator

from loguru import logger

from quotes.constants import LINE_JOIN_DELIMITER
from quotes.models import RawBlock


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yields the lines of a text, splitting on '\\n' and dropping one trailing '\\r'.

    A trailing newline does not produce a final empty line.
    """
    if not contents:
        return
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


@dataclass
class SegmenterState:
    """
    Scan state of the segmenter.

    Two states: no block open (start_line is None) and block open starting
    at the 0-based line start_line.
    """
    line_delimiter: str = LINE_JOIN_DELIMITER
    previous_line_empty: bool = False
    start_line: int | None = None
    parts: list[str] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.start_line is not None

    def on_blank(self) -> None:
        self.previous_line_empty = True

    def on_line(self, index: int, line: str, single_line_break: bool) -> RawBlock | None:
        """
        Consumes a non-blank line.

        Returns:
            The block closed by this line, if any.
        """
        closed = None
        if (self.previous_line_empty or single_line_break) and self.is_open:
            closed = self.close()
            # Only cleared when a block is closed, so a leading blank line
            # stays in effect until the second line of the first block.
            self.previous_line_empty = False

        if not self.is_open:
            self.start_line = index
        self.parts.append(line)
        self.parts.append(self.line_delimiter)
        return closed

    def close(self) -> RawBlock | None:
        """Emits the open block, if any, and returns to the no-block state."""
        if not self.is_open:
            return None
        block = RawBlock(text="".join(self.parts), line_number=self.start_line + 1)
        self.start_line = None
        self.parts = []
        return block


class BlockSegmenter:
    """
    Splits file contents into raw quote blocks.

    Each block's lines are joined with the line-join delimiter, which is also
    appended after the last line.
    """
    def __init__(self, single_line_break: bool = False, line_delimiter: str = LINE_JOIN_DELIMITER):
        """
        Args:
            single_line_break: End a block at every line break instead of at blank lines.
            line_delimiter: Marker appended after every line of a block.
        """
        self.single_line_break = single_line_break
        self.line_delimiter = line_delimiter

    def iter_blocks(self, contents: str) -> Iterator[RawBlock]:
        state = SegmenterState(line_delimiter=self.line_delimiter)
        for index, line in enumerate(iter_lines(contents)):
            if line == "":
                state.on_blank()
                continue
            closed = state.on_line(index, line, self.single_line_break)
            if closed is not None:
                yield closed

        # File did not end on a line that closed the last block
        last = state.close()
        if last is not None:
            yield last

    def segment(self, contents: str) -> list[RawBlock]:
        blocks = list(self.iter_blocks(contents))
        logger.debug(f"Segmented {len(blocks)} blocks (single_line_break={self.single_line_break})")
        return blocks


def segment(
    contents: str,
    single_line_break: bool = False,
    line_delimiter: str = LINE_JOIN_DELIMITER,
) -> list[RawBlock]:
    """
    Splits file contents into raw quote blocks.

    Args:
        contents: Whole input text.
        single_line_break: End a block at every line break.
        line_delimiter: Marker appended after every line of a block.

    Returns:
        Blocks in file order with 1-based starting line numbers.
    """
    return BlockSegmenter(single_line_break, line_delimiter).segment(contents)
