"""Tests for running both scanners across modules."""

import json
import logging

import pytest

from dep_audit.config import RuntimeConfig
from dep_audit.core.component import Component
from dep_audit.core.findings import GroupLabel, MessageBucket
from dep_audit.exceptions import ConfigError, ManifestNotFoundError
from dep_audit.runner import AuditRunner, create_runner
from dep_audit.scanners import ComposerRequirementsScanner, DeprecatedClassesScanner
from dep_audit.utils.logging import setup_logging
from dep_audit.utils.performance import BENCHMARK_ENV_VAR, benchmark
from tests.fakes import (
    FakeClassSource,
    FakeComponentSource,
    FakeManifestSource,
    FakePlatformVersion,
    FakeSettings,
    FakeVersionOracle,
)


def build_runner(manifests, components, classes, deprecated):
    bucket = MessageBucket()
    component_source = FakeComponentSource(components, classes)
    requirements_scanner = ComposerRequirementsScanner(
        FakeManifestSource(manifests), bucket, FakeVersionOracle(), FakeSettings(), FakePlatformVersion("8.2.0")
    )
    deprecated_scanner = DeprecatedClassesScanner(bucket, FakeClassSource(deprecated), component_source)
    return AuditRunner(requirements_scanner, deprecated_scanner, component_source, bucket)


@pytest.fixture
def modules():
    names = [f"Vendor_Module{index}" for index in range(6)]
    manifests = {name: {"php": "^8.1", "vendor/unused": "*"} for name in names}
    components = {name: [Component("Vendor\\A", "vendor/a", "1.0.0")] for name in names}
    classes = {name: [f"{name}\\Old", f"{name}\\Virtual"] for name in names}
    deprecated = {f"{name}\\Old": True for name in names}
    return names, manifests, components, classes, deprecated


class TestAuditRunner:
    """Test orchestration of the scanners."""

    def test_runs_both_scanners_per_module(self, modules):
        names, manifests, components, classes, deprecated = modules
        runner = build_runner(manifests, components, classes, deprecated)

        bucket = runner.run(names[:1])

        assert [f.group for f in bucket.get_messages()] == [
            GroupLabel.MISSING_DEPENDENCY,
            GroupLabel.UNNECESSARY_DEPENDENCY,
            GroupLabel.WILDCARD_VERSION,
            GroupLabel.DEPRECATED_USAGE,
        ]

    def test_concurrent_run_matches_sequential(self, modules):
        names, manifests, components, classes, deprecated = modules
        sequential = build_runner(manifests, components, classes, deprecated).run(names)
        concurrent = build_runner(manifests, components, classes, deprecated).run(names, max_workers=4)

        assert len(concurrent) == len(sequential)
        for name in names:
            assert concurrent.get_messages_by_module(name) == sequential.get_messages_by_module(name)

    def test_hard_failure_propagates(self, modules):
        names, manifests, components, classes, deprecated = modules
        del manifests[names[2]]
        runner = build_runner(manifests, components, classes, deprecated)

        with pytest.raises(ManifestNotFoundError):
            runner.run(names, max_workers=3)


class TestCreateRunner:
    """Test wiring of the production collaborators."""

    def test_end_to_end(self, tmp_path):
        module_path = tmp_path / "app" / "code" / "Vendor" / "Module"
        module_path.mkdir(parents=True)
        (module_path / "composer.json").write_text(json.dumps({
            "require": {"php": "^8.1", "magento/framework": "*", "vendor/unused": "^1.0"}
        }))
        (tmp_path / "installed.json").write_text(json.dumps({"packages": [
            {"name": "magento/framework", "version": "103.0.6"},
            {"name": "vendor/missing", "version": "2.4.6"},
        ]}))
        (tmp_path / "inventory.json").write_text(json.dumps({
            "modules": {"Vendor_Module": {
                "components": [
                    {"component": "Magento\\Framework", "package": "magento/framework", "version": "103.0.6"},
                    {"component": "Vendor\\Missing", "package": "vendor/missing", "version": "2.4.6"},
                ],
                "classes": ["Vendor\\Module\\Old", "Vendor\\Module\\Proxy"],
            }},
            "classes": {"Vendor\\Module\\Old": {"deprecated": True}},
        }))
        config = RuntimeConfig.from_dict({
            "platform_version": "7.4.33",
            "module_paths": {"Vendor_Module": "app/code/Vendor/Module"},
            "inventory_file": "inventory.json",
            "installed_file": "installed.json",
        }, base_path=tmp_path)

        bucket = create_runner(config).run(["Vendor_Module"])
        findings = [(f.group, f.message, f.suggestion) for f in bucket.get_messages()]

        assert findings == [
            (
                GroupLabel.MISSING_DEPENDENCY,
                'No composer dependency found for "vendor/missing"',
                "Current version is 2.4.6. Perhaps use ^2.4?",
            ),
            (
                GroupLabel.UNMET_REQUIREMENT,
                'Required PHP version "^8.1" does not match your current PHP version 7.4.33',
                "",
            ),
            (
                GroupLabel.WILDCARD_VERSION,
                'Composer requirement "magento/framework" set to wildcard version',
                "Current version is set to *. Perhaps use ^103.0?",
            ),
            (
                GroupLabel.UNNECESSARY_DEPENDENCY,
                'Composer requirement "vendor/unused" possibly not needed',
                "",
            ),
            (
                GroupLabel.DEPRECATED_USAGE,
                'Usage of class "Vendor\\Module\\Old" is deprecated',
                "",
            ),
        ]

    def test_inventory_is_required(self):
        with pytest.raises(ConfigError):
            create_runner(RuntimeConfig())


class TestBenchmark:
    """Test the timing decorator."""

    def test_reports_when_enabled(self, monkeypatch, caplog):
        monkeypatch.setenv(BENCHMARK_ENV_VAR, "1")
        caplog.set_level(logging.INFO, logger="Performance")

        @benchmark
        def work():
            return 42

        assert work() == 42
        assert "took" in caplog.text

    def test_silent_by_default(self, monkeypatch, caplog):
        monkeypatch.delenv(BENCHMARK_ENV_VAR, raising=False)
        caplog.set_level(logging.INFO, logger="Performance")

        @benchmark
        def work():
            return 42

        assert work() == 42
        assert caplog.text == ""


class TestSetupLogging:
    """Test verbose logging configuration."""

    SCANNER_LOGGERS = ("ComposerRequirementsScanner", "DeprecatedClassesScanner", "AuditRunner")

    def scan_missing_dependency(self, caplog):
        scanner = ComposerRequirementsScanner(
            FakeManifestSource({"Vendor_Module": {}}), MessageBucket(), FakeVersionOracle(),
            FakeSettings(), FakePlatformVersion("8.2.0")
        )
        # Scanner loggers do not propagate to the root logger
        scanner.logger.logger.addHandler(caplog.handler)
        try:
            scanner.scan("Vendor_Module", [Component("Vendor\\A", "vendor/a", "1.0.0")])
        finally:
            scanner.logger.logger.removeHandler(caplog.handler)
        return [r for r in caplog.records if r.name == "ComposerRequirementsScanner"]

    def test_verbose_enables_scanner_debug_messages(self, caplog):
        root_level = logging.getLogger().level
        try:
            setup_logging(verbose=True)
            records = self.scan_missing_dependency(caplog)
        finally:
            logging.getLogger().setLevel(root_level)
            for name in self.SCANNER_LOGGERS:
                logging.getLogger(name).setLevel(logging.NOTSET)

        debug_messages = [r.getMessage() for r in records if r.levelno == logging.DEBUG]
        assert any('No composer dependency found for "vendor/a"' in m for m in debug_messages)

    def test_scanner_debug_messages_hidden_by_default(self, caplog):
        for name in self.SCANNER_LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET)

        records = self.scan_missing_dependency(caplog)

        assert not [r for r in records if r.levelno == logging.DEBUG]
