"""Run both scanners over a set of modules."""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from .config import RuntimeConfig
from .core.findings import MessageBucket
from .core.interfaces import ComponentSource
from .exceptions import ConfigError
from .providers import (
    ComposerFileProvider,
    ComposerVersionOracle,
    InventoryClassInspector,
    InventoryComponentSource,
    PhpVersionProvider,
    load_inventory,
)
from .scanners import ComposerRequirementsScanner, DeprecatedClassesScanner
from .utils.logging import get_logger


class AuditRunner:
    """Feeds every module through the requirement and deprecation scanners."""

    def __init__(
        self,
        requirements_scanner: ComposerRequirementsScanner,
        deprecated_scanner: DeprecatedClassesScanner,
        component_source: ComponentSource,
        message_bucket: MessageBucket,
    ) -> None:
        self.requirements_scanner = requirements_scanner
        self.deprecated_scanner = deprecated_scanner
        self.component_source = component_source
        self.message_bucket = message_bucket
        self.logger = get_logger("AuditRunner")

    def scan_module(self, module_name: str) -> None:
        """Run both scanners for one module.

        Raises:
            ManifestNotFoundError: If the module has no composer.json
            ManifestReadError: If the composer.json cannot be read
        """
        components = self.component_source.get_components_for_module(module_name)
        self.requirements_scanner.scan(module_name, components)
        self.deprecated_scanner.scan(module_name)

    def run(self, module_names: Iterable[str], max_workers: int = 1) -> MessageBucket:
        """Scan modules and return the shared message bucket.

        Args:
            module_names: Modules to scan
            max_workers: Number of modules scanned concurrently

        Returns:
            Message bucket holding all findings
        """
        modules: List[str] = list(module_names)
        self.logger.info("Scanning %d modules", len(modules))

        if max_workers <= 1 or len(modules) <= 1:
            for module_name in modules:
                self.scan_module(module_name)
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                # Consume results so that hard failures reach the caller
                for _ in executor.map(self.scan_module, modules):
                    pass

        self.logger.info("Scan finished with %d findings", len(self.message_bucket))
        return self.message_bucket


def create_runner(config: RuntimeConfig, message_bucket: Optional[MessageBucket] = None) -> AuditRunner:
    """Wire the production collaborators described by a configuration.

    Args:
        config: Runtime configuration; ``inventory_file`` is required
        message_bucket: Bucket to collect into, a new one when omitted

    Raises:
        ConfigError: If no inventory file is configured
        InventoryError: If the inventory cannot be loaded
    """
    if config.inventory_file is None:
        raise ConfigError("inventory_file must be configured")

    inventory = load_inventory(config.inventory_file)
    component_source = InventoryComponentSource(inventory["modules"])
    class_inspector = InventoryClassInspector(inventory["classes"])

    if config.installed_file is not None:
        version_oracle = ComposerVersionOracle.from_installed_file(config.installed_file)
    else:
        version_oracle = ComposerVersionOracle()

    bucket = message_bucket if message_bucket is not None else MessageBucket()
    requirements_scanner = ComposerRequirementsScanner(
        manifest_source=ComposerFileProvider(config.module_paths),
        message_bucket=bucket,
        version_oracle=version_oracle,
        runtime_config=config,
        platform_version=PhpVersionProvider(config.platform_version),
    )
    deprecated_scanner = DeprecatedClassesScanner(
        message_bucket=bucket,
        class_source=class_inspector,
        component_source=component_source,
    )
    return AuditRunner(requirements_scanner, deprecated_scanner, component_source, bucket)
