import socket
from typing import List

import httpx
import pytest

from n8n_ready.preflight import CheckStatus
from n8n_ready.preflight.checks import domain as domain_module
from n8n_ready.preflight.checks.domain import check_domain, get_public_ip

SERVICES = ["https://ip.example.test"]


@pytest.fixture
def lookups(monkeypatch: pytest.MonkeyPatch):
    """Stub both network lookups and count calls."""
    state = {"public_ip": "203.0.113.10", "resolved": "203.0.113.10", "calls": []}

    async def fake_public_ip(services, timeout=5.0) -> str:
        state["calls"].append("public_ip")
        if isinstance(state["public_ip"], Exception):
            raise state["public_ip"]
        return state["public_ip"]

    async def fake_resolve(host: str, timeout=5.0) -> str:
        state["calls"].append(f"resolve:{host}")
        if isinstance(state["resolved"], Exception):
            raise state["resolved"]
        return state["resolved"]

    monkeypatch.setattr(domain_module, "get_public_ip", fake_public_ip)
    monkeypatch.setattr(domain_module, "resolve_host", fake_resolve)
    return state


@pytest.mark.asyncio
@pytest.mark.parametrize("host", ["localhost", "127.0.0.1"])
async def test_loopback_skips_network(lookups, host: str) -> None:
    result = await check_domain(host, SERVICES)
    assert result.status == CheckStatus.SUCCESS
    assert result.message == "Using localhost configuration"
    assert lookups["calls"] == []


@pytest.mark.asyncio
async def test_missing_host_is_a_warning(lookups) -> None:
    result = await check_domain(None, SERVICES)
    assert result.status == CheckStatus.WARNING
    assert "N8N_HOST" in result.message
    assert lookups["calls"] == []


@pytest.mark.asyncio
async def test_matching_dns_succeeds(lookups) -> None:
    result = await check_domain("n8n.example.com", SERVICES)
    assert result.status == CheckStatus.SUCCESS
    assert result.details == "n8n.example.com → 203.0.113.10"
    assert sorted(lookups["calls"]) == ["public_ip", "resolve:n8n.example.com"]


@pytest.mark.asyncio
async def test_dns_drift_is_a_warning(lookups) -> None:
    lookups["resolved"] = "198.51.100.7"
    result = await check_domain("n8n.example.com", SERVICES)
    assert result.status == CheckStatus.WARNING
    assert "198.51.100.7" in result.details
    assert "203.0.113.10" in result.details


@pytest.mark.asyncio
async def test_nxdomain_is_an_indeterminate_error(lookups) -> None:
    lookups["resolved"] = socket.gaierror(-2, "Name or service not known")
    result = await check_domain("missing.example.com", SERVICES)
    assert result.status == CheckStatus.ERROR
    assert "indeterminate" in result.message
    assert "Name or service not known" in result.details


@pytest.mark.asyncio
async def test_public_ip_failure_is_an_error(lookups) -> None:
    lookups["public_ip"] = RuntimeError("Public IP lookup failed")
    result = await check_domain("n8n.example.com", SERVICES)
    assert result.status == CheckStatus.ERROR
    assert "Public IP lookup failed" in result.details


def _patch_transport(monkeypatch: pytest.MonkeyPatch, handler) -> List[str]:
    seen: List[str] = []
    real_client = httpx.AsyncClient

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return handler(request)

    def client_factory(**kwargs):
        return real_client(transport=httpx.MockTransport(recording), **kwargs)

    monkeypatch.setattr(domain_module.httpx, "AsyncClient", client_factory)
    return seen


@pytest.mark.asyncio
async def test_public_ip_falls_back_to_next_service(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "first.test":
            return httpx.Response(503, request=request)
        return httpx.Response(200, text="203.0.113.10\n", request=request)

    seen = _patch_transport(monkeypatch, handler)

    ip = await get_public_ip(["https://first.test", "https://second.test"])

    assert ip == "203.0.113.10"
    assert len(seen) == 2


@pytest.mark.asyncio
async def test_public_ip_rejects_non_ip_body(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_transport(
        monkeypatch,
        lambda request: httpx.Response(200, text="<html>blocked</html>", request=request),
    )

    with pytest.raises(RuntimeError):
        await get_public_ip(["https://first.test"])
