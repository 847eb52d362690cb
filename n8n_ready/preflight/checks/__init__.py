"""
Doctor Check Implementations

Individual check modules for different readiness areas.
"""

from .compose import check_docker, check_docker_compose
from .ports import check_port_available, check_ports, probe_ports
from .domain import check_domain, get_public_ip, resolve_host

__all__ = [
    "check_docker",
    "check_docker_compose",
    "check_port_available",
    "check_ports",
    "probe_ports",
    "check_domain",
    "get_public_ip",
    "resolve_host",
]
