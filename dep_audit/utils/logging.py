"""Logging utilities for dep_audit."""

import logging
import sys
from pathlib import Path
from typing import Optional, Any
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme


class AuditLogger:
    """Logger wrapper with rich console formatting."""

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup rich stderr handler with custom theme."""
        console = Console(stderr=True, theme=Theme({
            "info": "cyan",
            "warning": "yellow",
            "error": "red",
            "debug": "dim",
        }))

        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s", datefmt="[%X]"))

        # Loggers are fetched per scanner instance; keep a single handler
        self.logger.handlers.clear()
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def info(self, msg: str, *args: Any) -> None:
        """Log info message."""
        self.logger.info(msg, *args)

    def warning(self, msg: str, *args: Any) -> None:
        """Log warning message."""
        self.logger.warning(msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        """Log error message."""
        self.logger.error(msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        """Log debug message."""
        self.logger.debug(msg, *args)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    verbose: bool = False
) -> None:
    """Setup root logging configuration for dep_audit.

    Args:
        level: Logging level
        log_file: Optional log file path
        verbose: Enable verbose logging
    """
    if verbose:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            *([logging.FileHandler(log_file)] if log_file else [])
        ]
    )

    if verbose:
        for name in ("ComposerRequirementsScanner", "DeprecatedClassesScanner", "AuditRunner"):
            logging.getLogger(name).setLevel(logging.DEBUG)


def get_logger(name: str) -> AuditLogger:
    """Get a dep_audit logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    level = logging.getLogger(name).level or logging.INFO
    return AuditLogger(name, level)
