#!/usr/bin/env python3
"""
Quotes - CLI Interface.

Usage:
    python main.py list quotes.txt
    python main.py list quotes.txt --line-number --author mandela
    python main.py count quotes.txt
    python main.py write quotes.txt collected.txt --search leaders
"""

import functools
import sys
from pathlib import Path

import click
from loguru import logger

sys.path.insert(0, str(Path(__file__).parent))

from quotes import __version__
from quotes.config.global_config import QuotesConfig, load_config
from quotes.constants import DEFAULT_CONFIG_PATH, LOG_ROTATION, MISSING_OUTPUT_MESSAGE
from quotes.core.collection import search
from quotes.models import Quote
from quotes.parsing.parser import QuoteParser
from quotes.parsing.tokenizer import log_unpaired
from quotes.utils.console import print_lengths, print_list
from quotes.utils.quote_writer import write_quotes


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """
    Configures loguru sinks.

    Warnings and errors go to stderr so they never mix with the quote output
    on stdout.

    Args:
        verbose: If True, sets log level to DEBUG; otherwise WARNING on stderr.
        log_file: Optional rotating log file receiving INFO and above.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    if log_file:
        logger.add(log_file, rotation=LOG_ROTATION, level="DEBUG" if verbose else "INFO")


def fail(message: str) -> None:
    """Prints an error to stderr and exits with status 1."""
    click.echo(message, err=True)
    raise SystemExit(1)


def read_quotes_file(input_path: Path) -> str:
    """
    Reads the whole input file as UTF-8.

    Exits with status 1 if the file cannot be read or decoded.
    """
    try:
        # Decoded without newline translation so a lone "\r" stays inside its line
        return input_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {input_path}: {e}")
        fail(f"Error: could not read file {input_path}: {e}")


def load_quotes(
    input_path: Path,
    config: QuotesConfig,
    single_line_break: bool | None,
    warn_unpaired: bool,
    author: str | None,
    search_term: str | None,
) -> list[Quote]:
    """
    Reads, parses and filters the input file.

    The text filter is applied before the author filter.
    """
    contents = read_quotes_file(input_path)
    parser = QuoteParser.from_config(
        config.parser,
        single_line_break=single_line_break,
    )
    if warn_unpaired:
        parser.tokenizer.on_unpaired = log_unpaired

    quotes = parser.parse(contents)
    logger.info(f"Parsed {len(quotes)} quotes from {input_path}")

    if search_term is not None:
        quotes = search(quotes, search_term, by_author=False)
    if author is not None:
        quotes = search(quotes, author, by_author=True)
    return quotes


def quote_options(func):
    """Options shared by every command: filters, parser settings, config and logging."""
    @click.option("-a", "--author", help="Filter quotes by author (case-insensitive substring)")
    @click.option("-s", "--search", "search_term", help="Filter quote text (case-insensitive substring)")
    @click.option(
        "--single-line-break/--no-single-line-break",
        default=None,
        help="Treat every line break as the end of a quote (default from config)",
    )
    @click.option("--warn-unpaired", is_flag=True, help="Log tokens dropped for lack of an author")
    @click.option(
        "-c", "--config", "config_path",
        type=click.Path(path_type=Path),
        default=DEFAULT_CONFIG_PATH,
        show_default=True,
        help="Configuration file",
    )
    @click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
    @functools.wraps(func)
    def wrapper(config_path: Path, verbose: bool, **kwargs):
        try:
            config = load_config(config_path)
        except ValueError as e:
            fail(f"Error: {e}")
        setup_logging(verbose, config.log_file)
        return func(config=config, **kwargs)
    return wrapper


@click.group()
@click.version_option(version=__version__, prog_name="quotes")
def cli():
    """Parse, filter, count and collect quotes from a text file."""


@cli.command("list")
@click.argument("input_file", type=click.Path(path_type=Path))
@click.option("-l", "--line-number", is_flag=True, help="Include the line number of each quote")
@quote_options
def list_quotes(
    config: QuotesConfig,
    input_file: Path,
    line_number: bool,
    author: str | None,
    search_term: str | None,
    single_line_break: bool | None,
    warn_unpaired: bool,
):
    """List all quotes."""
    quotes = load_quotes(input_file, config, single_line_break, warn_unpaired, author, search_term)
    print_list(quotes, line_number)


@cli.command()
@click.argument("input_file", type=click.Path(path_type=Path))
@quote_options
def count(
    config: QuotesConfig,
    input_file: Path,
    author: str | None,
    search_term: str | None,
    single_line_break: bool | None,
    warn_unpaired: bool,
):
    """Count the number of quotes from each author."""
    quotes = load_quotes(input_file, config, single_line_break, warn_unpaired, author, search_term)
    print_lengths(quotes)


@cli.command()
@click.argument("input_file", type=click.Path(path_type=Path))
@click.argument("output_file", required=False, type=click.Path(path_type=Path))
@quote_options
def write(
    config: QuotesConfig,
    input_file: Path,
    output_file: Path | None,
    author: str | None,
    search_term: str | None,
    single_line_break: bool | None,
    warn_unpaired: bool,
):
    """
    Write quotes to another file.

    Appends quotes to the end of OUTPUT_FILE, creating it if needed.
    """
    if output_file is None:
        logger.error("write called without an output file")
        fail(MISSING_OUTPUT_MESSAGE)

    quotes = load_quotes(input_file, config, single_line_break, warn_unpaired, author, search_term)
    try:
        written = write_quotes(quotes, output_file)
    except OSError as e:
        logger.error(f"Could not write {output_file}: {e}")
        fail(f"Error: could not write file {output_file}: {e}")
    print(f"Appended {written} quotes to {output_file}")


if __name__ == "__main__":
    cli()
