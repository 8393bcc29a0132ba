"""Shared fixtures for dep_audit tests."""

from typing import Dict, List

import pytest

from dep_audit.core.findings import MessageBucket
from dep_audit.scanners import ComposerRequirementsScanner, DeprecatedClassesScanner
from tests.fakes import (
    FakeClassSource,
    FakeComponentSource,
    FakeManifestSource,
    FakePlatformVersion,
    FakeSettings,
    FakeVersionOracle,
)


@pytest.fixture
def bucket():
    """Empty message bucket."""
    return MessageBucket()


@pytest.fixture
def oracle():
    return FakeVersionOracle()


@pytest.fixture
def settings():
    return FakeSettings()


@pytest.fixture
def platform():
    return FakePlatformVersion()


@pytest.fixture
def make_requirements_scanner(bucket, oracle, settings, platform):
    """Build a requirements scanner for a single module manifest."""
    def factory(requirements: Dict[str, str], module_name: str = "Vendor_Module"):
        return ComposerRequirementsScanner(
            manifest_source=FakeManifestSource({module_name: requirements}),
            message_bucket=bucket,
            version_oracle=oracle,
            runtime_config=settings,
            platform_version=platform,
        )
    return factory


@pytest.fixture
def make_deprecated_scanner(bucket):
    """Build a deprecation scanner over the given class names and flags."""
    def factory(class_names: List[str], deprecated: Dict[str, bool], module_name: str = "Vendor_Module"):
        class_source = FakeClassSource(deprecated)
        scanner = DeprecatedClassesScanner(
            message_bucket=bucket,
            class_source=class_source,
            component_source=FakeComponentSource(classes={module_name: class_names}),
        )
        return scanner, class_source
    return factory
