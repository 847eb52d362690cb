"""
Port Availability Validation

Checks that the ports a profile publishes are free on this host.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from ..models import CheckResult, CheckStatus, PortCheck

logger = logging.getLogger(__name__)


async def _refuse(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    writer.close()


async def check_port_available(port: int, host: Optional[str] = None) -> PortCheck:
    """
    Try to listen on a port.

    Args:
        port: TCP port to probe
        host: Bind address, None for all interfaces

    Returns:
        PortCheck, available only if the bind succeeded
    """
    try:
        server = await asyncio.start_server(_refuse, host=host, port=port)
    except OSError as e:
        logger.debug("Port %d is in use: %s", port, e)
        return PortCheck(port=port, available=False)

    try:
        return PortCheck(port=port, available=True)
    finally:
        server.close()
        await server.wait_closed()


async def probe_ports(ports: Sequence[int], host: Optional[str] = None) -> List[PortCheck]:
    """Probe all ports concurrently, returning checks in input order."""
    return list(await asyncio.gather(
        *(check_port_available(port, host) for port in ports)
    ))


async def check_ports(ports: Sequence[int], host: Optional[str] = None) -> CheckResult:
    """
    Check every required port and report all conflicts at once.

    Args:
        ports: Ports in the order they should be reported
        host: Bind address, None for all interfaces

    Returns:
        CheckResult listing unavailable ports in input order
    """
    checks = await probe_ports(ports, host)
    unavailable = [str(check.port) for check in checks if not check.available]

    if unavailable:
        return CheckResult(
            name="Port Availability",
            status=CheckStatus.ERROR,
            message="Some ports are already in use",
            details=f"Unavailable ports: {', '.join(unavailable)}",
        )

    return CheckResult(
        name="Port Availability",
        status=CheckStatus.SUCCESS,
        message="All required ports are available",
        details=f"Checked ports: {', '.join(str(p) for p in ports)}",
    )
