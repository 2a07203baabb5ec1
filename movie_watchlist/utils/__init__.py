"""
Shared utilities package.

This package contains logging configuration and other shared utilities
used across the application.
"""

from movie_watchlist.utils.logging_config import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
