"""Report usage of deprecated classes within a module."""

from ..core.findings import GroupLabel, MessageBucket
from ..core.interfaces import ClassSource, ComponentSource
from ..utils.logging import get_logger
from ..utils.performance import benchmark


class DeprecatedClassesScanner:
    """Flags every class of a module whose definition is marked deprecated."""

    def __init__(
        self,
        message_bucket: MessageBucket,
        class_source: ClassSource,
        component_source: ComponentSource,
    ) -> None:
        self.message_bucket = message_bucket
        self.class_source = class_source
        self.component_source = component_source
        self.logger = get_logger("DeprecatedClassesScanner")

    @benchmark
    def scan(self, module_name: str) -> None:
        """Scan all classes of a module for deprecation markers.

        Args:
            module_name: Module to scan
        """
        for class_name in self.component_source.get_class_names_for_module(module_name):
            result = self.class_source.load_class(class_name)
            if result.skipped:
                self.logger.debug("Skipping %s: %s", class_name, result.skip_reason)
                continue

            if not result.metadata.deprecated:
                continue

            self.logger.debug("%s: %s is deprecated", module_name, class_name)
            self.message_bucket.add(
                f'Usage of class "{class_name}" is deprecated',
                GroupLabel.DEPRECATED_USAGE,
                "",
                module_name,
            )
