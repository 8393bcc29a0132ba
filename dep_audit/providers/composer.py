"""Composer backed manifest source and version oracle."""

import json
from collections import OrderedDict
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..core.constraints import stable_release
from ..exceptions import ManifestNotFoundError, ManifestReadError
from ..utils.logging import get_logger

COMPOSER_FILE = "composer.json"


class ComposerFileProvider:
    """Reads the ``require`` section of a module's composer.json."""

    def __init__(self, module_paths: Mapping[str, Path]) -> None:
        """Initialize the provider.

        Args:
            module_paths: Module name -> module directory
        """
        self.module_paths = {name: Path(path) for name, path in module_paths.items()}
        self.logger = get_logger("ComposerFileProvider")

    def get_composer_file_by_module_name(self, module_name: str) -> Path:
        """Locate the composer.json of a module.

        Raises:
            ManifestNotFoundError: If the module is unknown or has no composer.json
        """
        module_path = self.module_paths.get(module_name)
        if module_path is None:
            raise ManifestNotFoundError(module_name, "module path is not configured")

        composer_file = module_path / COMPOSER_FILE
        if not composer_file.is_file():
            raise ManifestNotFoundError(module_name, str(composer_file))
        return composer_file

    def get_manifest_by_module_name(self, module_name: str) -> Dict[str, str]:
        """Get the declared requirements of a module.

        Args:
            module_name: Module to look up

        Returns:
            Requirement name -> version constraint, in declaration order

        Raises:
            ManifestNotFoundError: If no composer.json exists for the module
            ManifestReadError: If the composer.json cannot be read or decoded
        """
        composer_file = self.get_composer_file_by_module_name(module_name)
        try:
            with open(composer_file, 'r', encoding='utf-8') as f:
                data = json.load(f, object_pairs_hook=OrderedDict)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ManifestReadError(module_name, str(e)) from e

        if not isinstance(data, dict):
            raise ManifestReadError(module_name, "composer.json is not a JSON object")

        requirements = data.get("require", {})
        if not isinstance(requirements, dict):
            raise ManifestReadError(module_name, '"require" is not a JSON object')

        self.logger.debug("Loaded %d requirements from %s", len(requirements), composer_file)
        return {str(name): str(constraint) for name, constraint in requirements.items()}


class ComposerVersionOracle:
    """Answers version questions from Composer's installed packages list."""

    def __init__(self, installed_versions: Optional[Mapping[str, str]] = None) -> None:
        self.installed_versions: Dict[str, str] = dict(installed_versions or {})

    @classmethod
    def from_installed_file(cls, installed_file: Path) -> "ComposerVersionOracle":
        """Load installed versions from ``vendor/composer/installed.json``.

        Both the Composer 1 (plain list) and Composer 2 (``{"packages": [...]}``)
        layouts are accepted.

        Args:
            installed_file: Path to installed.json

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid installed.json
        """
        if not installed_file.is_file():
            raise FileNotFoundError(f"File not found: {installed_file}")

        with open(installed_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        packages: List[Dict[str, Any]]
        if isinstance(data, dict):
            packages = data.get("packages", [])
        elif isinstance(data, list):
            packages = data
        else:
            raise ValueError(f"Unexpected installed.json layout in {installed_file}")

        versions = {}
        for package in packages:
            if isinstance(package, dict) and package.get("name") and package.get("version"):
                versions[package["name"]] = str(package["version"])
        return cls(versions)

    def get_version_by_name(self, package_name: str) -> str:
        """Installed version of a package, or an empty string when unknown."""
        return self.installed_versions.get(package_name, "")

    def should_suggest_version(self, package_name: str) -> bool:
        """Only stable installed releases make a useful suggestion."""
        version = self.get_version_by_name(package_name)
        return bool(version) and stable_release(version) is not None

    def get_suggested_version(self, version: str) -> str:
        """Suggest a caret constraint for a concrete version.

        Examples:
            ``2.4.6`` -> ``^2.4``, ``0.3.1`` -> ``^0.3.1``
        """
        release = stable_release(version)
        if release is None:
            return version

        parts = list(release.release) + [0, 0]
        major, minor, patch = parts[0], parts[1], parts[2]
        if major == 0:
            return f"^0.{minor}.{patch}"
        return f"^{major}.{minor}"
