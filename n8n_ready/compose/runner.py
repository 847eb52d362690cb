"""
Compose Lifecycle

Brings an n8n-ready project up or down through the detected compose
command.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..config.defaults import COMPOSE_FILENAME
from .detector import ComposeCommand, ComposeDetector
from .process import CommandError, run_command

logger = logging.getLogger(__name__)


class ComposeError(Exception):
    """A compose invocation failed."""
    pass


class ProjectNotFoundError(ComposeError):
    """The directory holds no docker-compose.yml."""
    pass


class ComposeAction(str, Enum):
    """Lifecycle actions and their compose arguments."""
    UP = "up"
    DOWN = "down"

    @property
    def args(self) -> tuple:
        return ("up", "-d") if self is ComposeAction.UP else ("down",)


# Words compose prints on stderr while making progress
PROGRESS_KEYWORDS = {
    ComposeAction.UP: ("Creating", "Starting"),
    ComposeAction.DOWN: ("Stopping", "Removing"),
}


def looks_like_progress(stderr: str, action: ComposeAction) -> bool:
    """Check whether compose stderr is ordinary progress output."""
    return any(keyword in stderr for keyword in PROGRESS_KEYWORDS[action])


@dataclass
class ComposeOutcome:
    """Result of a successful up/down run."""
    action: ComposeAction
    command: ComposeCommand
    warning: Optional[str] = None


class ComposeRunner:
    """
    Runs ``up -d`` and ``down`` for a project directory.

    Failures are raised, never retried: an incomplete up/down needs the
    operator's attention immediately.
    """

    def __init__(
        self,
        project_path: Union[str, Path] = ".",
        detector: Optional[ComposeDetector] = None,
        timeout: float = 600.0,
    ):
        """
        Initialize the runner.

        Args:
            project_path: Directory containing docker-compose.yml
            detector: Shared detector (one per CLI run)
            timeout: Seconds allowed for the compose invocation
        """
        self.project_path = Path(project_path)
        self.detector = detector or ComposeDetector()
        self.timeout = timeout

    @property
    def compose_path(self) -> Path:
        return self.project_path / COMPOSE_FILENAME

    def check_project(self) -> None:
        """
        Verify the directory is an n8n-ready project.

        Raises:
            ProjectNotFoundError: if docker-compose.yml is missing
        """
        if not self.compose_path.is_file():
            raise ProjectNotFoundError(
                f"No {COMPOSE_FILENAME} found in {self.project_path.resolve()}"
            )

    async def up(self) -> ComposeOutcome:
        """Start all services in the background."""
        return await self.run(ComposeAction.UP)

    async def down(self) -> ComposeOutcome:
        """Stop and remove all services."""
        return await self.run(ComposeAction.DOWN)

    async def run(self, action: ComposeAction) -> ComposeOutcome:
        """
        Run a lifecycle action.

        Args:
            action: UP or DOWN

        Returns:
            ComposeOutcome with any non-fatal stderr as a warning

        Raises:
            ProjectNotFoundError: if docker-compose.yml is missing
            ComposeError: if no compose command is usable or the run fails
        """
        self.check_project()

        command = await self.detector.detect()
        if command is None:
            raise ComposeError(
                "Docker Compose is not available. Make sure Docker Compose is installed"
            )

        argv = command.argv + action.args
        logger.info("Running '%s' in %s", " ".join(argv), self.project_path)

        try:
            result = await run_command(argv, cwd=self.project_path, timeout=self.timeout)
        except CommandError as e:
            raise ComposeError(str(e)) from e

        if not result.ok:
            message = result.stderr.strip() or result.stdout.strip()
            raise ComposeError(
                f"'{' '.join(argv)}' exited with status {result.returncode}: {message}"
            )

        warning = None
        stderr = result.stderr.strip()
        if stderr and not looks_like_progress(stderr, action):
            warning = stderr

        return ComposeOutcome(
            action=action,
            command=command,
            warning=warning,
        )
