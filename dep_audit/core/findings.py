"""Findings and the shared append-only message bucket."""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List


class GroupLabel(str, Enum):
    """Fixed taxonomy of finding groups."""

    MISSING_DEPENDENCY = "Missing composer dependency"
    UNNECESSARY_DEPENDENCY = "Unnecessary composer dependency"
    WILDCARD_VERSION = "Wildcard composer version"
    UNMET_REQUIREMENT = "Unmet requirement"
    DEPRECATED_USAGE = "Deprecated code usage"


@dataclass(frozen=True)
class Finding:
    """A single diagnostic attributed to a module."""

    message: str
    group: GroupLabel
    suggestion: str = ""
    module: str = ""

    @property
    def has_suggestion(self) -> bool:
        return bool(self.suggestion)


class MessageBucket:
    """Append-only collection of findings shared by all scanners.

    Appends are serialized with a lock so that a host may scan several
    modules concurrently against the same bucket.
    """

    def __init__(self) -> None:
        self._findings: List[Finding] = []
        self._lock = threading.Lock()

    def add(self, message: str, group: GroupLabel, suggestion: str = "", module: str = "") -> Finding:
        """Record a finding.

        Args:
            message: Human readable message
            group: Group label the finding belongs to
            suggestion: Optional suggestion text
            module: Module the finding is attributed to

        Returns:
            The recorded finding
        """
        finding = Finding(message=message, group=group, suggestion=suggestion, module=module)
        with self._lock:
            self._findings.append(finding)
        return finding

    def get_messages(self) -> List[Finding]:
        """Get a snapshot of all findings in insertion order."""
        with self._lock:
            return list(self._findings)

    def get_messages_by_module(self, module: str) -> List[Finding]:
        return [finding for finding in self.get_messages() if finding.module == module]

    def get_messages_by_group(self, group: GroupLabel) -> List[Finding]:
        return [finding for finding in self.get_messages() if finding.group == group]

    def group_by_module(self) -> Dict[str, List[Finding]]:
        """Group findings by module, preserving first-seen module order."""
        grouped: Dict[str, List[Finding]] = {}
        for finding in self.get_messages():
            grouped.setdefault(finding.module, []).append(finding)
        return grouped

    def __len__(self) -> int:
        with self._lock:
            return len(self._findings)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.get_messages())
