"""
Docker Availability Checks

Validates that Docker and a Docker Compose command are usable.
"""

from typing import Optional, Tuple

from ...compose.detector import ComposeCommand, ComposeDetector
from ..models import CheckResult, CheckStatus


async def check_docker(detector: ComposeDetector) -> CheckResult:
    """Check the Docker client is installed."""
    version = await detector.docker_version()

    if version is None:
        return CheckResult(
            name="Docker Installation",
            status=CheckStatus.ERROR,
            message="Docker is not installed or not accessible",
            details="Install Docker from https://docs.docker.com/get-docker/",
        )

    return CheckResult(
        name="Docker Installation",
        status=CheckStatus.SUCCESS,
        message="Docker is installed",
        details=version,
    )


async def check_docker_compose(
    detector: ComposeDetector,
) -> Tuple[Optional[ComposeCommand], CheckResult]:
    """
    Check a compose command is usable.

    Args:
        detector: Compose detector for this run

    Returns:
        The usable command (or None) and its check result
    """
    command = await detector.detect()

    if command is None:
        return None, CheckResult(
            name="Docker Compose",
            status=CheckStatus.ERROR,
            message="Docker Compose is not available",
            details="Make sure Docker Compose is installed",
        )

    if command.legacy:
        return command, CheckResult(
            name="Docker Compose",
            status=CheckStatus.WARNING,
            message="Using legacy docker-compose command",
            details=f"{command.version}. Consider upgrading to Docker Compose V2",
        )

    return command, CheckResult(
        name="Docker Compose",
        status=CheckStatus.SUCCESS,
        message="Docker Compose is available",
        details=command.version,
    )
