"""Cross-check composer requirements against the components a module uses."""

from typing import Dict, List, Optional

from ..core.component import Component
from ..core.constraints import InvalidConstraintError, satisfies
from ..core.findings import GroupLabel, MessageBucket
from ..core.interfaces import ManifestSource, PlatformVersionProvider, RuntimeSettings, VersionOracle
from ..core.rules import (
    is_always_valid_requirement,
    is_console_framework,
    is_extension_requirement,
    is_platform_runtime,
    is_wildcard,
)
from ..utils.logging import get_logger
from ..utils.performance import benchmark


class ComposerRequirementsScanner:
    """Reports missing, needless, wildcard and unmet composer requirements."""

    def __init__(
        self,
        manifest_source: ManifestSource,
        message_bucket: MessageBucket,
        version_oracle: VersionOracle,
        runtime_config: RuntimeSettings,
        platform_version: PlatformVersionProvider,
    ) -> None:
        self.manifest_source = manifest_source
        self.message_bucket = message_bucket
        self.version_oracle = version_oracle
        self.runtime_config = runtime_config
        self.platform_version = platform_version
        self.logger = get_logger("ComposerRequirementsScanner")

    @benchmark
    def scan(self, module_name: str, components: List[Component]) -> None:
        """Scan a module's composer requirements against its components.

        Args:
            module_name: Module to scan
            components: Components observed in the module's source

        Raises:
            ManifestNotFoundError: If the module has no composer.json
            ManifestReadError: If the composer.json cannot be read
        """
        requirements = self.manifest_source.get_manifest_by_module_name(module_name)
        self.logger.debug(
            "Scanning %s: %d components, %d requirements", module_name, len(components), len(requirements)
        )

        for component in components:
            self._scan_component(component, requirements, module_name)

        for requirement, constraint in requirements.items():
            self._check_requirement_is_needed(requirement, components, module_name)
            self._check_wildcard_version(requirement, constraint, module_name)
            self._check_platform_version(requirement, constraint, module_name)

    def _scan_component(self, component: Component, requirements: Dict[str, str], module_name: str) -> None:
        if component.soft_requirement:
            return

        if component.package_name in requirements:
            return

        if component.package_name and is_console_framework(component.package_name):
            return

        package_name = component.display_name
        version = component.package_version
        suggestion = f"Current version is {version}."
        if self.version_oracle.should_suggest_version(package_name):
            # Suggestion is derived from the component's own resolved version
            suggestion += f" Perhaps use {self.version_oracle.get_suggested_version(version)}?"

        self._add(
            f'No composer dependency found for "{package_name}"',
            GroupLabel.MISSING_DEPENDENCY,
            suggestion,
            module_name,
        )

    def _check_requirement_is_needed(
        self,
        requirement: str,
        components: List[Component],
        module_name: str
    ) -> None:
        if self.runtime_config.is_hide_needless_enabled():
            return

        if self._is_requirement_needed(requirement, components):
            return

        if self.runtime_config.is_whitelisted(requirement):
            return

        self._add(
            f'Composer requirement "{requirement}" possibly not needed',
            GroupLabel.UNNECESSARY_DEPENDENCY,
            "",
            module_name,
        )

    def _check_wildcard_version(self, requirement: str, constraint: str, module_name: str) -> None:
        if is_extension_requirement(requirement):
            return

        if not is_wildcard(constraint):
            return

        version = self.version_oracle.get_version_by_name(requirement)
        suggestion = f"Current version is set to {constraint}."
        if self.version_oracle.should_suggest_version(requirement):
            suggestion += f" Perhaps use {self.version_oracle.get_suggested_version(version)}?"

        self._add(
            f'Composer requirement "{requirement}" set to wildcard version',
            GroupLabel.WILDCARD_VERSION,
            suggestion,
            module_name,
        )

    def _check_platform_version(self, requirement: str, constraint: str, module_name: str) -> None:
        if not is_platform_runtime(requirement):
            return

        current_version = self.platform_version.get_version()
        if self._satisfies(current_version, constraint):
            return

        self._add(
            f'Required PHP version "{constraint}" does not match your current PHP version {current_version}',
            GroupLabel.UNMET_REQUIREMENT,
            "",
            module_name,
        )

    def _satisfies(self, current_version: str, constraint: str) -> bool:
        try:
            return satisfies(current_version, constraint)
        except InvalidConstraintError as e:
            self.logger.warning("Cannot evaluate PHP constraint %r: %s", constraint, e)
            return False

    @staticmethod
    def _is_requirement_needed(requirement: str, components: List[Component]) -> bool:
        for component in components:
            if component.package_name == requirement:
                return True

        return is_always_valid_requirement(requirement)

    def _add(self, message: str, group: GroupLabel, suggestion: str, module_name: str) -> None:
        self.logger.debug("%s: %s", module_name, message)
        self.message_bucket.add(message, group, suggestion, module_name)
