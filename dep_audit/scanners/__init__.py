"""Scanners producing findings for a single module."""

from .deprecated import DeprecatedClassesScanner
from .requirements import ComposerRequirementsScanner

__all__ = [
    "ComposerRequirementsScanner",
    "DeprecatedClassesScanner",
]
