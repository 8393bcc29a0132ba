"""Exception hierarchy for dep_audit."""


class DepAuditError(Exception):
    """Base class for all dep_audit errors."""


class ManifestNotFoundError(DepAuditError, FileNotFoundError):
    """No composer.json could be located for a module."""

    def __init__(self, module_name: str, detail: str = "") -> None:
        self.module_name = module_name
        message = f"No composer.json found for module {module_name}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ManifestReadError(DepAuditError, OSError):
    """A composer.json exists but could not be read or decoded."""

    def __init__(self, module_name: str, detail: str) -> None:
        self.module_name = module_name
        super().__init__(f"Failed to read composer.json for module {module_name}: {detail}")


class PlatformVersionError(DepAuditError):
    """The running platform version could not be determined."""


class InventoryError(DepAuditError):
    """The component inventory is missing or malformed."""


class ConfigError(DepAuditError, ValueError):
    """The runtime configuration is invalid."""
