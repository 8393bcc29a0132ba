"""dep_audit - Consistency checks between composer requirements and actual usage."""

__version__ = "0.1.0"

from .config import RuntimeConfig
from .core import Component, Finding, GroupLabel, MessageBucket
from .runner import AuditRunner, create_runner
from .scanners import ComposerRequirementsScanner, DeprecatedClassesScanner

__all__ = [
    "AuditRunner",
    "Component",
    "ComposerRequirementsScanner",
    "DeprecatedClassesScanner",
    "Finding",
    "GroupLabel",
    "MessageBucket",
    "RuntimeConfig",
    "create_runner",
]
