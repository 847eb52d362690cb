"""
Compose Command Detection

Finds the usable Docker Compose command on this host.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .process import CommandError, run_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposeCommand:
    """A usable compose command and the version it reported."""
    argv: Tuple[str, ...]
    version: str
    legacy: bool = False

    @property
    def display(self) -> str:
        """Command as an operator would type it."""
        return " ".join(self.argv)


class ComposeDetector:
    """
    Detects Docker and Docker Compose.

    Detection order:
    1. ``docker compose version`` (Compose V2 plugin)
    2. ``docker-compose --version`` (legacy standalone)

    Results are cached for the lifetime of the detector, so one CLI run
    spawns each version probe at most once.
    """

    MODERN_COMMAND = ("docker", "compose")
    LEGACY_COMMAND = ("docker-compose",)
    DOCKER_VERSION = ("docker", "--version")

    def __init__(self, timeout: float = 5.0):
        """
        Initialize the detector.

        Args:
            timeout: Seconds allowed for each version probe
        """
        self.timeout = timeout
        self._docker_checked = False
        self._docker_version: Optional[str] = None
        self._compose_checked = False
        self._compose: Optional[ComposeCommand] = None

    async def docker_version(self) -> Optional[str]:
        """
        Get the Docker client version string.

        Returns:
            Output of ``docker --version``, None if Docker is unusable.
        """
        if not self._docker_checked:
            self._docker_version = await self._probe(self.DOCKER_VERSION)
            self._docker_checked = True
        return self._docker_version

    async def detect(self) -> Optional[ComposeCommand]:
        """
        Detect the compose command, preferring Compose V2.

        Returns:
            ComposeCommand if found, None otherwise.
        """
        if self._compose_checked:
            return self._compose

        version = await self._probe(self.MODERN_COMMAND + ("version",))
        if version is not None:
            self._compose = ComposeCommand(argv=self.MODERN_COMMAND, version=version)
        else:
            version = await self._probe(self.LEGACY_COMMAND + ("--version",))
            if version is not None:
                self._compose = ComposeCommand(
                    argv=self.LEGACY_COMMAND, version=version, legacy=True
                )

        self._compose_checked = True
        if self._compose:
            logger.debug("Using compose command '%s'", self._compose.display)
        else:
            logger.debug("No compose command available")
        return self._compose

    async def _probe(self, argv: Tuple[str, ...]) -> Optional[str]:
        """Run a version query, returning its trimmed output on success."""
        try:
            result = await run_command(argv, timeout=self.timeout)
        except CommandError as e:
            logger.debug("%s", e)
            return None

        if not result.ok:
            logger.debug("'%s' failed: %s", " ".join(argv), result.stderr.strip())
            return None

        return result.stdout.strip()
