from pathlib import Path
from typing import Optional

import pytest

from n8n_ready.compose.detector import ComposeCommand, ComposeDetector

PROD_COMPOSE = """services:
  n8n:
    image: n8nio/n8n
    networks:
      - n8n_network
networks:
  n8n_network:
    driver: bridge
"""

LOCAL_COMPOSE = """services:
  n8n:
    image: n8nio/n8n
    ports:
      - "5678:5678"
"""


class FakeDetector(ComposeDetector):
    """Detector that answers without spawning processes."""

    def __init__(
        self,
        docker: Optional[str] = "Docker version 27.0.3",
        compose: Optional[ComposeCommand] = ComposeCommand(
            argv=("docker", "compose"), version="Docker Compose version v2.29.1"
        ),
    ) -> None:
        super().__init__(timeout=1.0)
        self._docker = docker
        self._fake_compose = compose
        self.detect_calls = 0

    async def docker_version(self) -> Optional[str]:
        return self._docker

    async def detect(self) -> Optional[ComposeCommand]:
        self.detect_calls += 1
        return self._fake_compose


@pytest.fixture
def fake_detector() -> FakeDetector:
    return FakeDetector()


@pytest.fixture
def make_detector():
    return FakeDetector


@pytest.fixture
def local_project(tmp_path: Path) -> Path:
    project = tmp_path / "local-project"
    project.mkdir()
    (project / "docker-compose.yml").write_text(LOCAL_COMPOSE)
    return project


@pytest.fixture
def prod_project(tmp_path: Path) -> Path:
    project = tmp_path / "prod-project"
    project.mkdir()
    (project / "docker-compose.yml").write_text(PROD_COMPOSE)
    return project
