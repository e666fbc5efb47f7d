"""
bbcschedules.args - Command line argument parsing module

Provides argument parsing and validation for the bbcschedules command.
"""

from .base import DEFAULT_CONFIG_FILE, ArgumentParser
from .validator import ArgumentValidator

__all__ = [
    "ArgumentParser",       # Main public interface
    "ArgumentValidator",    # For testing/validation
    "DEFAULT_CONFIG_FILE",  # Default configuration path
]
