"""
Quote file parsing toolkit.

Splits a loosely structured text file into quote blocks and each block into
(text, author) phrases.
"""

__version__ = "1.0.0"
