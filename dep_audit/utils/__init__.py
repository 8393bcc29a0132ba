"""Utility functions and helpers for dep_audit."""

from .logging import setup_logging, get_logger
from .performance import benchmark

__all__ = [
    "setup_logging",
    "get_logger",
    "benchmark",
]
