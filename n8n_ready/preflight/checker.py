"""
Doctor Checker

Main orchestrator for readiness checks.
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, List, Optional, Union

from ..compose.detector import ComposeDetector
from ..config.defaults import ENV_FILENAME, get_ports_for_profile
from ..config.loader import detect_profile, read_env_values
from ..config.models import DoctorSettings, Profile
from .models import CheckResult, CheckStatus, OverallStatus
from .checks.compose import check_docker, check_docker_compose
from .checks.ports import check_ports
from .checks.domain import check_domain

logger = logging.getLogger(__name__)


@dataclass
class DoctorReport:
    """Complete doctor results, in execution order."""
    checks: List[CheckResult]
    project_path: Optional[Path] = None
    profile: Optional[Profile] = None

    def _count(self, status: CheckStatus) -> int:
        return sum(1 for c in self.checks if c.status == status)

    @property
    def successes(self) -> int:
        return self._count(CheckStatus.SUCCESS)

    @property
    def warnings(self) -> int:
        return self._count(CheckStatus.WARNING)

    @property
    def errors(self) -> int:
        return self._count(CheckStatus.ERROR)

    @property
    def status(self) -> OverallStatus:
        """Roll up all checks: any error fails, any warning degrades."""
        if self.errors:
            return OverallStatus.FAILED
        if self.warnings:
            return OverallStatus.DEGRADED
        return OverallStatus.CLEAN

    @property
    def passed(self) -> bool:
        """True when no check reported an error."""
        return self.errors == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def summary(self) -> str:
        """Get summary string."""
        return (
            f"Summary: {self.successes} passed, "
            f"{self.warnings} warnings, {self.errors} errors"
        )


class DoctorChecker:
    """
    Orchestrates readiness checks.

    Runs, in order:
    - Docker installation
    - Docker Compose availability (V2, legacy fallback)
    - Port availability for the project's profile
    - Domain resolution against this server's public IP
    """

    def __init__(
        self,
        project_path: Optional[Union[str, Path]] = None,
        settings: Optional[DoctorSettings] = None,
        detector: Optional[ComposeDetector] = None,
    ):
        """
        Initialize the checker.

        Args:
            project_path: n8n-ready project directory for project checks
            settings: Timeouts and endpoints
            detector: Compose detector shared with the rest of the run
        """
        self.project_path = Path(project_path) if project_path else None
        self.settings = settings or DoctorSettings()
        self.detector = detector or ComposeDetector(timeout=self.settings.command_timeout)

    async def run_all(self) -> DoctorReport:
        """
        Run all doctor checks.

        Returns:
            DoctorReport with every check result
        """
        checks = [
            await self._guard("Docker Installation", check_docker(self.detector)),
            await self._guard("Docker Compose", self._compose_check()),
        ]

        profile = None
        if self.project_path and self.project_path.is_dir():
            profile = detect_profile(self.project_path)
            ports = get_ports_for_profile(profile)
            if ports:
                checks.append(await self._guard(
                    "Port Availability",
                    check_ports(ports, self.settings.bind_host),
                ))

            if (self.project_path / ENV_FILENAME).exists():
                env = read_env_values(self.project_path)
                checks.append(await self._guard(
                    "Domain Configuration",
                    check_domain(
                        env.host,
                        self.settings.public_ip_services,
                        self.settings.network_timeout,
                    ),
                ))
        elif self.project_path:
            logger.warning("Project path %s is not a directory, skipping project checks",
                           self.project_path)

        return DoctorReport(checks=checks, project_path=self.project_path, profile=profile)

    def run(self) -> DoctorReport:
        """Run all checks on a fresh event loop."""
        return asyncio.run(self.run_all())

    async def _compose_check(self) -> CheckResult:
        _, result = await check_docker_compose(self.detector)
        return result

    async def _guard(self, name: str, check: Awaitable[CheckResult]) -> CheckResult:
        """Turn an unexpected failure inside a check into an error result."""
        try:
            return await check
        except Exception as e:
            logger.exception("Check '%s' crashed", name)
            return CheckResult(
                name=name,
                status=CheckStatus.ERROR,
                message="Check failed unexpectedly",
                details=str(e) or type(e).__name__,
            )
