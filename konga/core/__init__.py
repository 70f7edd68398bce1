"""
Core utilities and configuration for konga.

This package provides logging configuration, settings, the clock used to stamp
seed records, and the domain models the seeds are built from.
"""

from konga.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
