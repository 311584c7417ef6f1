"""Shared fixtures for all test modules."""

import pytest
from loguru import logger

from quotes.models import Phrase, Quote

SAMPLE_QUOTES_TEXT = """\
If you set your goals ridiculously high and it's a failure, you will fail above everyone else's success. -James Cameron

Life is what happens when you're busy making other plans. -John Lennon

“Real leaders must be ready to sacrifice all for the freedom of their people.” - Nelson Mandela

“A fundamental concern for others in our individual and community lives would go a long way in making the world the better place we so passionately dreamt of.” - Nelson Mandela

He didn’t fall? Inconceivable! - Vizzini 
You keep using that word. I do not think it means what you think it means - Inigo Montoya"""

SINGLE_LINE_QUOTES_TEXT = """\
If you set your goals ridiculously high and it's a failure, you will fail above everyone else's success. -James Cameron
Life is what happens when you're busy making other plans. -John Lennon
“Real leaders must be ready to sacrifice all for the freedom of their people.” - Nelson Mandela
“A fundamental concern for others in our individual and community lives would go a long way in making the world the better place we so passionately dreamt of.” - Nelson Mandela
“He didn’t fall? Inconceivable!” - Vizzini “You keep using that word. I do not think it means what you think it means” - Inigo Montoya"""

PRINCESS_BRIDE = (
    Phrase("He didn’t fall? Inconceivable!", "Vizzini"),
    Phrase("You keep using that word. I do not think it means what you think it means", "Inigo Montoya"),
)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by CLI runs so they never outlive the captured streams."""
    yield
    logger.remove()


@pytest.fixture
def sample_text():
    return SAMPLE_QUOTES_TEXT


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "quotes.txt"
    path.write_text(SAMPLE_QUOTES_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def sample_quotes():
    return [
        Quote(1, (Phrase("Life is what happens when you're busy making other plans.", "John Lennon"),)),
        Quote(3, (Phrase("Real leaders must be ready to sacrifice all for the freedom of their people.", "Nelson Mandela"),)),
        Quote(5, (Phrase("It always seems impossible until it's done.", "Nelson Mandela"),)),
        Quote(7, PRINCESS_BRIDE),
        Quote(10, (
            Phrase("Hello.", "Inigo Montoya"),
            Phrase("You killed my father.", "Inigo Montoya"),
            Phrase("Prepare to die.", "Inigo Montoya"),
        )),
    ]
