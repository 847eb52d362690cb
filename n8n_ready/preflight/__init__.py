"""
Doctor Check Module

Validates the host and project configuration before deployment.
"""

from .models import CheckResult, CheckStatus, OverallStatus, PortCheck
from .checker import DoctorChecker, DoctorReport

__all__ = [
    "DoctorChecker",
    "DoctorReport",
    "CheckResult",
    "CheckStatus",
    "OverallStatus",
    "PortCheck",
]
