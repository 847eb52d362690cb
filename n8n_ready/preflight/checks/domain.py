"""
Domain Configuration Validation

Verifies that the configured N8N_HOST resolves to this server's public
address.
"""

import asyncio
import ipaddress
import logging
import socket
from typing import Optional, Sequence

import httpx

from ...config.defaults import LOOPBACK_HOSTS
from ..models import CheckResult, CheckStatus

logger = logging.getLogger(__name__)


async def get_public_ip(services: Sequence[str], timeout: float = 5.0) -> str:
    """
    Ask public address services for this host's IPv4 address.

    Args:
        services: Plain-text IP echo URLs, tried in order
        timeout: Seconds allowed per request

    Returns:
        Public IPv4 address

    Raises:
        RuntimeError: if no service returned a valid IPv4 address
    """
    errors = []

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        for url in services:
            try:
                response = await client.get(url)
                response.raise_for_status()
                return str(ipaddress.IPv4Address(response.text.strip()))
            except (httpx.HTTPError, ValueError) as e:
                logger.debug("Public IP lookup via %s failed: %s", url, e)
                errors.append(f"{url}: {e}")

    raise RuntimeError("Public IP lookup failed (" + "; ".join(errors) + ")")


async def resolve_host(host: str, timeout: float = 5.0) -> str:
    """
    Resolve a hostname to its first IPv4 address.

    Raises:
        OSError: on resolver failure (socket.gaierror for NXDOMAIN)
        asyncio.TimeoutError: if resolution takes too long
    """
    loop = asyncio.get_running_loop()
    infos = await asyncio.wait_for(
        loop.getaddrinfo(host, None, family=socket.AF_INET, type=socket.SOCK_STREAM),
        timeout=timeout,
    )
    if not infos:
        raise OSError(f"No IPv4 address for {host}")
    return infos[0][4][0]


async def check_domain(
    host: Optional[str],
    public_ip_services: Sequence[str],
    timeout: float = 5.0,
) -> CheckResult:
    """
    Check that the configured domain points to this server.

    Args:
        host: N8N_HOST value, None when not configured
        public_ip_services: Services used to discover the public address
        timeout: Seconds allowed for each lookup

    Returns:
        success when DNS matches the public IP, warning on mismatch,
        error when either lookup fails
    """
    if not host:
        return CheckResult(
            name="Domain Configuration",
            status=CheckStatus.WARNING,
            message="N8N_HOST not configured in .env",
            details="Set N8N_HOST to your domain name",
        )

    if host in LOOPBACK_HOSTS:
        return CheckResult(
            name="Domain Configuration",
            status=CheckStatus.SUCCESS,
            message="Using localhost configuration",
            details=f"Domain: {host}",
        )

    public_ip, domain_ip = await asyncio.gather(
        get_public_ip(public_ip_services, timeout),
        resolve_host(host, timeout),
        return_exceptions=True,
    )

    failures = [r for r in (public_ip, domain_ip) if isinstance(r, BaseException)]
    if failures:
        reasons = "; ".join(str(e) or type(e).__name__ for e in failures)
        return CheckResult(
            name="Domain Configuration",
            status=CheckStatus.ERROR,
            message="Cannot resolve domain or detect public IP (result indeterminate)",
            details=f"Domain: {host}. Error: {reasons}",
        )

    if domain_ip == public_ip:
        return CheckResult(
            name="Domain Configuration",
            status=CheckStatus.SUCCESS,
            message="Domain points to this server",
            details=f"{host} → {domain_ip}",
        )

    return CheckResult(
        name="Domain Configuration",
        status=CheckStatus.WARNING,
        message="Domain does not point to this server",
        details=f"{host} → {domain_ip}, but server IP is {public_ip}",
    )
