"""
Configuration module for bedrock_lang.
"""

from .loader import load_config
from .schema import LangConfig, LoggingConfig

__all__ = [
    "load_config",
    "LangConfig",
    "LoggingConfig",
]
