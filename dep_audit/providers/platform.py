"""Running PHP version lookup."""

import subprocess
from typing import Optional

from ..exceptions import PlatformVersionError
from ..utils.logging import get_logger

PHP_VERSION_COMMAND = ["php", "-r", "echo PHP_VERSION;"]


class PhpVersionProvider:
    """Reports the PHP version, from configuration or the ``php`` binary."""

    def __init__(self, configured_version: Optional[str] = None, timeout: float = 10.0) -> None:
        self._version = configured_version
        self.timeout = timeout
        self.logger = get_logger("PhpVersionProvider")

    def get_version(self) -> str:
        """Get the running PHP version, querying the binary at most once.

        Raises:
            PlatformVersionError: If PHP is not available or reports nothing
        """
        if self._version is None:
            self._version = self._query_php()
        return self._version

    def _query_php(self) -> str:
        try:
            completed = subprocess.run(
                PHP_VERSION_COMMAND,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise PlatformVersionError(f"Unable to determine PHP version: {e}") from e

        version = completed.stdout.strip()
        if not version:
            raise PlatformVersionError("PHP did not report a version")

        self.logger.debug("Detected PHP version %s", version)
        return version
