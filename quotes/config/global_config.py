"""
Global configuration loader (TOML).

Stores parser defaults and the optional log file location.
Uses Pydantic for validation.
"""

from pathlib import Path
import tomllib

from loguru import logger
from pydantic import ValidationError

from .models import QuotesConfigModel

QuotesConfig = QuotesConfigModel


def load_config(config_path: Path) -> QuotesConfig:
    """
    Loads and validates the configuration from a TOML file.

    A missing file is not an error: the built-in defaults apply.

    Args:
        config_path: Path to the configuration file (usually defaults.toml).

    Returns:
        A validated QuotesConfig object.

    Raises:
        ValueError: If the file is not valid TOML or fails validation.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return QuotesConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        return QuotesConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {config_path}:\n{e}") from e
