import asyncio
import sys
from typing import Dict, List, Tuple

import pytest

from n8n_ready.compose import detector as detector_module
from n8n_ready.compose import process as process_module
from n8n_ready.compose.detector import ComposeDetector
from n8n_ready.compose.process import CommandError, CommandResult, run_command
from n8n_ready.preflight import CheckStatus
from n8n_ready.preflight.checks.compose import check_docker, check_docker_compose


def _fake_runner(monkeypatch: pytest.MonkeyPatch, answers: Dict[Tuple[str, ...], object]) -> List:
    calls: List[Tuple[str, ...]] = []

    async def fake_run(argv, cwd=None, timeout=5.0) -> CommandResult:
        argv = tuple(argv)
        calls.append(argv)
        answer = answers.get(argv, CommandError(f"Cannot run '{' '.join(argv)}'"))
        if isinstance(answer, Exception):
            raise answer
        return answer

    monkeypatch.setattr(detector_module, "run_command", fake_run)
    return calls


def _ok(argv: Tuple[str, ...], stdout: str) -> CommandResult:
    return CommandResult(argv=argv, returncode=0, stdout=stdout + "\n")


MODERN = ("docker", "compose", "version")
LEGACY = ("docker-compose", "--version")
DOCKER = ("docker", "--version")


@pytest.mark.asyncio
async def test_prefers_modern_compose(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _fake_runner(monkeypatch, {
        MODERN: _ok(MODERN, "Docker Compose version v2.29.1"),
        LEGACY: _ok(LEGACY, "docker-compose version 1.29.2"),
    })

    command, result = await check_docker_compose(ComposeDetector())

    assert command.argv == ("docker", "compose")
    assert command.display == "docker compose"
    assert not command.legacy
    assert result.status == CheckStatus.SUCCESS
    assert result.details == "Docker Compose version v2.29.1"
    assert calls == [MODERN]


@pytest.mark.asyncio
async def test_legacy_only_is_a_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_runner(monkeypatch, {
        MODERN: CommandResult(argv=MODERN, returncode=1, stderr="'compose' is not a docker command."),
        LEGACY: _ok(LEGACY, "docker-compose version 1.29.2"),
    })

    command, result = await check_docker_compose(ComposeDetector())

    assert command.display == "docker-compose"
    assert command.legacy
    assert result.status == CheckStatus.WARNING
    assert result.details.startswith("docker-compose version 1.29.2")


@pytest.mark.asyncio
async def test_no_compose_is_an_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_runner(monkeypatch, {})

    command, result = await check_docker_compose(ComposeDetector())

    assert command is None
    assert result.status == CheckStatus.ERROR
    assert "installed" in result.details


@pytest.mark.asyncio
async def test_detection_is_memoized(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _fake_runner(monkeypatch, {LEGACY: _ok(LEGACY, "docker-compose version 1.29.2")})
    detector = ComposeDetector()

    first = await detector.detect()
    second = await detector.detect()

    assert first is second
    assert calls == [MODERN, LEGACY]


@pytest.mark.asyncio
async def test_docker_check(monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_runner(monkeypatch, {DOCKER: _ok(DOCKER, "Docker version 27.0.3")})
    result = await check_docker(ComposeDetector())
    assert result.status == CheckStatus.SUCCESS
    assert result.details == "Docker version 27.0.3"


@pytest.mark.asyncio
async def test_docker_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_runner(monkeypatch, {})
    result = await check_docker(ComposeDetector())
    assert result.status == CheckStatus.ERROR
    assert "docs.docker.com" in result.details


@pytest.mark.asyncio
async def test_run_command_captures_streams_and_status() -> None:
    result = await run_command(
        [sys.executable, "-c", "import sys; print('out'); sys.stderr.write('err'); sys.exit(3)"]
    )
    assert result.returncode == 3
    assert not result.ok
    assert result.stdout.strip() == "out"
    assert result.stderr == "err"


@pytest.mark.asyncio
async def test_run_command_missing_program() -> None:
    with pytest.raises(CommandError):
        await run_command(["n8n-ready-no-such-program"])


@pytest.mark.asyncio
async def test_run_command_timeout() -> None:
    with pytest.raises(CommandError, match="timed out"):
        await run_command([sys.executable, "-c", "import time; time.sleep(10)"], timeout=0.2)


class _ExitedProcess:
    """Child that finishes on its own right after the wait times out."""

    returncode = 0

    async def communicate(self):
        await asyncio.sleep(10)

    def kill(self) -> None:
        raise ProcessLookupError

    async def wait(self) -> int:
        return 0


@pytest.mark.asyncio
async def test_run_command_timeout_when_child_already_exited(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_exec(*argv, **kwargs):
        return _ExitedProcess()

    monkeypatch.setattr(process_module.asyncio, "create_subprocess_exec", fake_exec)

    with pytest.raises(CommandError, match="timed out"):
        await run_command(["docker", "compose", "up", "-d"], timeout=0.05)
