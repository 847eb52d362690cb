"""
Docker Compose Integration

Command detection and project lifecycle (up/down).
"""

from .detector import ComposeCommand, ComposeDetector
from .process import CommandError, CommandResult, run_command
from .runner import (
    ComposeAction,
    ComposeError,
    ComposeOutcome,
    ComposeRunner,
    ProjectNotFoundError,
    looks_like_progress,
)

__all__ = [
    "ComposeCommand",
    "ComposeDetector",
    "CommandError",
    "CommandResult",
    "run_command",
    "ComposeAction",
    "ComposeError",
    "ComposeOutcome",
    "ComposeRunner",
    "ProjectNotFoundError",
    "looks_like_progress",
]
