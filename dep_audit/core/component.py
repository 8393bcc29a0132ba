"""Data models for observed components and class metadata."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Component:
    """An external package observed in a module's source."""

    component_name: str
    package_name: Optional[str] = None
    package_version: str = ""
    soft_requirement: bool = False

    def __post_init__(self) -> None:
        """Validate the component."""
        if not self.component_name and not self.package_name:
            raise ValueError("Component needs a component name or a package name")

    @property
    def display_name(self) -> str:
        """Package name when known, otherwise the internal component name."""
        return self.package_name or self.component_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Component":
        """Create a component from an inventory entry.

        Args:
            data: Mapping with ``component``/``package``/``version``/``soft`` keys

        Returns:
            Component instance
        """
        return cls(
            component_name=str(data.get("component") or ""),
            package_name=data.get("package") or None,
            package_version=str(data.get("version") or ""),
            soft_requirement=bool(data.get("soft", False)),
        )


@dataclass(frozen=True)
class ClassMetadata:
    """Inspection result for a single class."""

    name: str
    deprecated: bool = False


@dataclass(frozen=True)
class ClassLoadResult:
    """Outcome of loading a class: either metadata or a skip reason."""

    name: str
    metadata: Optional[ClassMetadata] = None
    skip_reason: str = ""

    @property
    def skipped(self) -> bool:
        return self.metadata is None

    @classmethod
    def loaded(cls, metadata: ClassMetadata) -> "ClassLoadResult":
        return cls(name=metadata.name, metadata=metadata)

    @classmethod
    def skip(cls, name: str, reason: str) -> "ClassLoadResult":
        return cls(name=name, skip_reason=reason)
