"""Collaborator protocols consumed by the scanners."""

from typing import Dict, List, Protocol

from .component import ClassLoadResult, Component


class ManifestSource(Protocol):
    """Supplies the declared requirements of a module."""

    def get_manifest_by_module_name(self, module_name: str) -> Dict[str, str]:
        """Return requirement name -> constraint, in declaration order.

        Raises:
            ManifestNotFoundError: If the module has no manifest
            ManifestReadError: If the manifest exists but cannot be read
        """
        ...


class ComponentSource(Protocol):
    """Supplies pre-computed usage facts for a module."""

    def get_components_for_module(self, module_name: str) -> List[Component]:
        ...

    def get_class_names_for_module(self, module_name: str) -> List[str]:
        ...


class ClassSource(Protocol):
    """Loads class metadata for deprecation checks."""

    def load_class(self, class_name: str) -> ClassLoadResult:
        ...


class VersionOracle(Protocol):
    """Knows installed versions and can suggest a version constraint."""

    def should_suggest_version(self, package_name: str) -> bool:
        ...

    def get_suggested_version(self, version: str) -> str:
        ...

    def get_version_by_name(self, package_name: str) -> str:
        ...


class RuntimeSettings(Protocol):
    """Toggles and the user whitelist."""

    def is_hide_needless_enabled(self) -> bool:
        ...

    def is_whitelisted(self, requirement: str) -> bool:
        ...


class PlatformVersionProvider(Protocol):
    """Reports the version of the running platform runtime."""

    def get_version(self) -> str:
        ...
