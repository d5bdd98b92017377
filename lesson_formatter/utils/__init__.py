"""Utility functions for the lesson formatter."""

from lesson_formatter.utils.logging import logger, setup_logging
from lesson_formatter.utils.config import load_config, merge_config

__all__ = ['logger', 'setup_logging', 'load_config', 'merge_config']
