"""
Doctor Check Models

Shared data types for readiness checks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CheckStatus(str, Enum):
    """Outcome of a single check."""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class OverallStatus(str, Enum):
    """Rollup of a complete doctor run."""
    CLEAN = "clean"
    DEGRADED = "degraded"
    FAILED = "failed"


@dataclass(frozen=True)
class CheckResult:
    """Result of a single doctor check."""
    name: str
    status: CheckStatus
    message: str
    details: Optional[str] = None


@dataclass(frozen=True)
class PortCheck:
    """Availability of one TCP port on the local host."""
    port: int
    available: bool
