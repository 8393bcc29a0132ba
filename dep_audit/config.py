"""Runtime configuration for dep_audit."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .exceptions import ConfigError


@dataclass
class RuntimeConfig:
    """Toggles, whitelist and collaborator locations for an audit run."""

    hide_needless: bool = False
    whitelist: List[str] = field(default_factory=list)
    platform_version: Optional[str] = None
    module_paths: Dict[str, Path] = field(default_factory=dict)
    inventory_file: Optional[Path] = None
    installed_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate and normalize configuration values."""
        if not isinstance(self.hide_needless, bool):
            raise ConfigError("hide_needless must be a boolean")

        if not isinstance(self.whitelist, (list, tuple, set)) or not all(
            isinstance(name, str) for name in self.whitelist
        ):
            raise ConfigError("whitelist must be a list of package names")
        self.whitelist = list(self.whitelist)

        if self.platform_version is not None and not isinstance(self.platform_version, str):
            raise ConfigError("platform_version must be a string")

        self.module_paths = {name: Path(path) for name, path in self.module_paths.items()}
        if self.inventory_file is not None:
            self.inventory_file = Path(self.inventory_file)
        if self.installed_file is not None:
            self.installed_file = Path(self.installed_file)

    def is_hide_needless_enabled(self) -> bool:
        return self.hide_needless

    def is_whitelisted(self, requirement: str) -> bool:
        return requirement in self.whitelist

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_path: Optional[Path] = None) -> "RuntimeConfig":
        """Build a configuration from a mapping.

        Relative paths are resolved against ``base_path`` when given.

        Args:
            data: Configuration mapping
            base_path: Directory relative paths are anchored to

        Returns:
            Runtime configuration
        """
        def resolve(value: Optional[str]) -> Optional[Path]:
            if value is None:
                return None
            path = Path(value)
            if base_path is not None and not path.is_absolute():
                path = base_path / path
            return path

        module_paths = data.get("module_paths", {})
        if not isinstance(module_paths, dict):
            raise ConfigError("module_paths must map module names to directories")

        return cls(
            hide_needless=data.get("hide_needless", False),
            whitelist=data.get("whitelist", []),
            platform_version=data.get("platform_version"),
            module_paths={name: resolve(path) for name, path in module_paths.items()},
            inventory_file=resolve(data.get("inventory_file")),
            installed_file=resolve(data.get("installed_file")),
        )

    @classmethod
    def from_file(cls, config_file: Path) -> "RuntimeConfig":
        """Load configuration from a JSON file.

        Args:
            config_file: Path to the configuration file

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load configuration {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {config_file} must be a JSON object")

        return cls.from_dict(data, base_path=Path(config_file).parent)
