"""Named exemption lists used by the requirement checks."""

from typing import FrozenSet

# Virtual package Composer uses for the PHP runtime itself
PLATFORM_RUNTIME = "php"

# Native PHP extension capabilities (ext-json, ext-curl, ...)
EXTENSION_PREFIX = "ext-"

WILDCARD_CONSTRAINT = "*"

# Used by console commands but shipped with the framework
CONSOLE_FRAMEWORK_PACKAGE = "symfony/console"

FRAMEWORK_CORE_PACKAGE = "magento/framework"

TOOLING_PACKAGES: FrozenSet[str] = frozenset({
    "magento/magento-composer-installer",
    "phpstan/phpstan",
    "bitexpert/phpstan-magento",
    "yireo/magento2-integration-test-helper",
})


def is_extension_requirement(requirement: str) -> bool:
    """Check whether a requirement names a native extension capability."""
    return requirement.startswith(EXTENSION_PREFIX)


def is_platform_runtime(requirement: str) -> bool:
    return requirement == PLATFORM_RUNTIME


def is_wildcard(constraint: str) -> bool:
    return constraint == WILDCARD_CONSTRAINT


def is_console_framework(package_name: str) -> bool:
    return package_name == CONSOLE_FRAMEWORK_PACKAGE


def is_always_valid_requirement(requirement: str) -> bool:
    """Check the fixed whitelist of requirements that never count as needless.

    Args:
        requirement: Requirement name from the manifest

    Returns:
        True for the PHP runtime, known tooling packages, the framework core
        package and native extensions
    """
    if is_platform_runtime(requirement):
        return True

    if requirement in TOOLING_PACKAGES:
        return True

    if requirement == FRAMEWORK_CORE_PACKAGE:
        return True

    return is_extension_requirement(requirement)
