"""Core models, rules and version matching for dep_audit."""

from .component import ClassLoadResult, ClassMetadata, Component
from .constraints import InvalidConstraintError, parse_constraint, satisfies
from .findings import Finding, GroupLabel, MessageBucket

__all__ = [
    "ClassLoadResult",
    "ClassMetadata",
    "Component",
    "Finding",
    "GroupLabel",
    "InvalidConstraintError",
    "MessageBucket",
    "parse_constraint",
    "satisfies",
]
