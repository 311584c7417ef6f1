"""
Configuration loading and validation.
"""

from .global_config import QuotesConfig, load_config

__all__ = ["QuotesConfig", "load_config"]
