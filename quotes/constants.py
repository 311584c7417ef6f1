"""
Global constants used across the quote parser.
"""

LINE_JOIN_DELIMITER = ";;"
"""Marker appended after every line of a block before tokenization"""

DEFAULT_CONFIG_PATH = "config/defaults.toml"
"""Configuration file read by the CLI when --config is not given"""

LOG_ROTATION = "10 MB"
"""Size at which the log file sink rotates"""

PHRASE_TEMPLATE = '"{text}" - {author}'
"""Rendered form of a single phrase"""

TOTAL_LABEL = "Total quotes"
"""Label of the summary line printed after the author counts"""

MISSING_OUTPUT_MESSAGE = "ERROR: `quotes write` must specify output file."
"""Diagnostic printed when the write command has no destination"""
