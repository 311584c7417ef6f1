"""End-to-end parsing tests for quotes.parsing.parser."""

from quotes.config.models import ParserConfig
from quotes.models import Phrase, Quote
from quotes.parsing.parser import QuoteParser, parse
from quotes.parsing.tokenizer import log_unpaired
from tests.conftest import PRINCESS_BRIDE, SINGLE_LINE_QUOTES_TEXT


class TestParse:
    def test_two_quotes_separated_by_blank_line(self):
        contents = (
            "Life is what happens when you're busy making other plans. -John Lennon\n"
            "\n"
            "\"Real leaders must be ready to sacrifice all for the freedom of their people.\" - Nelson Mandela\n"
        )
        assert parse(contents) == [
            Quote(1, (Phrase("Life is what happens when you're busy making other plans.", "John Lennon"),)),
            Quote(3, (Phrase("Real leaders must be ready to sacrifice all for the freedom of their people.", "Nelson Mandela"),)),
        ]

    def test_sample_file(self, sample_text):
        quotes = parse(sample_text)
        assert len(quotes) == 5
        assert quotes[0] == Quote.from_block(
            "If you set your goals ridiculously high and it's a failure, you will fail above everyone else's success. -James Cameron",
            1,
        )
        assert quotes[4] == Quote(9, PRINCESS_BRIDE)
        assert [q.line_number for q in quotes] == [1, 3, 5, 7, 9]

    def test_single_line_break(self):
        quotes = parse(SINGLE_LINE_QUOTES_TEXT, single_line_break=True)
        assert len(quotes) == 5
        assert [q.line_number for q in quotes] == [1, 2, 3, 4, 5]
        assert quotes[4] == Quote(5, PRINCESS_BRIDE)

    def test_same_lines_without_single_line_break_form_one_quote(self):
        quotes = parse(SINGLE_LINE_QUOTES_TEXT)
        assert len(quotes) == 1
        assert quotes[0].line_number == 1
        assert quotes[0].authors == {"James Cameron", "John Lennon", "Nelson Mandela", "Vizzini", "Inigo Montoya"}

    def test_malformed_block_still_yields_quote(self):
        quotes = parse("no author here\n\nfine - Author")
        assert quotes == [Quote(1, ()), Quote(3, (Phrase("fine", "Author"),))]

    def test_empty_contents(self):
        assert parse("") == []


class TestQuoteParser:
    def test_custom_line_delimiter_is_tokenized(self):
        parser = QuoteParser(line_delimiter="||")
        assert parser.parse("Hello - Ann\nBye - Bob") == [
            Quote(1, (Phrase("Hello", "Ann"), Phrase("Bye", "Bob")))
        ]

    def test_extra_delimiters(self):
        parser = QuoteParser(extra_delimiters=["—"])
        assert parser.parse("Be water, my friend.—Bruce Lee") == [
            Quote(1, (Phrase("Be water, my friend.", "Bruce Lee"),))
        ]

    def test_from_config(self):
        config = ParserConfig(single_line_break=True, warn_unpaired=True)
        parser = QuoteParser.from_config(config)
        assert parser.segmenter.single_line_break is True
        assert parser.tokenizer.on_unpaired is log_unpaired

    def test_from_config_override(self):
        config = ParserConfig(single_line_break=True)
        parser = QuoteParser.from_config(config, single_line_break=False)
        assert parser.segmenter.single_line_break is False
        assert parser.tokenizer.on_unpaired is None

    def test_on_unpaired_hook(self):
        dropped = []
        parser = QuoteParser(on_unpaired=lambda token, block: dropped.append(token))
        parser.parse("a - b - c\n\nd - e")
        assert dropped == ["c"]
