"""
Pydantic models for configuration validation.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from quotes.constants import LINE_JOIN_DELIMITER


class ParserConfig(BaseModel):
    """Configuration for the block segmenter and phrase tokenizer."""
    single_line_break: bool = False
    line_delimiter: str = LINE_JOIN_DELIMITER
    extra_delimiters: list[str] = Field(default_factory=list)
    warn_unpaired: bool = False

    @field_validator("line_delimiter")
    @classmethod
    def _non_empty_delimiter(cls, value: str) -> str:
        if not value:
            raise ValueError("line_delimiter must not be empty")
        return value

    @field_validator("extra_delimiters")
    @classmethod
    def _non_empty_extras(cls, value: list[str]) -> list[str]:
        if any(not item for item in value):
            raise ValueError("extra_delimiters must not contain empty strings")
        return value


class QuotesConfigModel(BaseModel):
    """
    Main configuration model for the application.
    Validates input from defaults.toml.
    """
    # Logging
    log_file: Path | None = None

    # Sub-configs
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @field_validator("log_file", mode="before")
    @classmethod
    def _blank_log_file(cls, value):
        # An empty string in TOML disables the file sink
        if value == "":
            return None
        return value
