"""
Child Process Execution

Runs external commands on the event loop with a bounded wait.
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """A command could not be started or did not finish in time."""
    pass


@dataclass(frozen=True)
class CommandResult:
    """Exit status and decoded output streams of a finished command."""
    argv: Sequence[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


async def run_command(
    argv: Sequence[str],
    cwd: Optional[Union[str, Path]] = None,
    timeout: float = 5.0,
) -> CommandResult:
    """
    Run a command and collect its output.

    Args:
        argv: Program and arguments
        cwd: Working directory for the child
        timeout: Seconds to wait before killing the child

    Returns:
        CommandResult, including non-zero exits

    Raises:
        CommandError: if the program is missing or the timeout expires
    """
    command = " ".join(argv)
    logger.debug("Running: %s (cwd=%s)", command, cwd or ".")

    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            cwd=str(cwd) if cwd else None,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CommandError(f"Cannot run '{command}': {e}") from e

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
        await proc.wait()
        raise CommandError(f"'{command}' timed out after {timeout:g}s")

    result = CommandResult(
        argv=tuple(argv),
        returncode=proc.returncode,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )
    logger.debug("'%s' exited with %d", command, result.returncode)
    return result
