"""
Project scaffolding.

Creates a new n8n-ready project directory from a profile template.
"""

import logging
from pathlib import Path
from typing import List, Union

import yaml

from ..config.defaults import (
    COMPOSE_FILENAME,
    ENV_EXAMPLE_FILENAME,
    PROFILE_TEMPLATES,
    get_env_example,
)
from ..config.models import Profile
from .engine import TemplateEngine
from .library import ENV_EXAMPLE_HEADER, PROFILE_PURPOSE, README_TEMPLATE

logger = logging.getLogger(__name__)


class ScaffoldError(Exception):
    """Project could not be created."""
    pass


def render_readme(project_name: str, profile: Profile, engine: TemplateEngine = None) -> str:
    """Generate README.md content for a new project."""
    engine = engine or TemplateEngine()
    template = PROFILE_TEMPLATES[profile]

    return engine.render(README_TEMPLATE, {
        "project_name": project_name,
        "profile": profile.value,
        "profile_purpose": PROFILE_PURPOSE[profile.value],
        "profile_summary": "\n".join(f"- {line}" for line in template["summary"]),
        "backup_notes": template["backup"],
    })


def render_env_example(profile: Profile, engine: TemplateEngine = None) -> str:
    """Generate .env.example content for a profile."""
    engine = engine or TemplateEngine()
    lines = [engine.render(ENV_EXAMPLE_HEADER, {"profile": profile.value})]
    for key, value in get_env_example(profile).items():
        lines.append(f"{key}={value}")
    return "\n".join(lines) + "\n"


class ProjectScaffolder:
    """Writes compose, .env.example and README files for a new project."""

    def __init__(self, project_dir: Union[str, Path], profile: Union[str, Profile]):
        """
        Initialize the scaffolder.

        Args:
            project_dir: Directory to create (must not exist)
            profile: 'local' or 'prod'

        Raises:
            ScaffoldError: if the profile has no template
        """
        self.project_dir = Path(project_dir)
        try:
            self.profile = Profile(profile)
        except ValueError:
            raise ScaffoldError(f'Profile must be either "local" or "prod", got "{profile}"')

        if self.profile not in PROFILE_TEMPLATES:
            raise ScaffoldError(f'Template for profile "{self.profile.value}" not found')

        self.engine = TemplateEngine()

    @property
    def project_name(self) -> str:
        return self.project_dir.name

    def create(self) -> List[Path]:
        """
        Create the project directory and its files.

        Returns:
            Paths of the files written

        Raises:
            ScaffoldError: if the directory already exists
        """
        if self.project_dir.exists():
            raise ScaffoldError(f'Directory "{self.project_dir}" already exists')

        self.project_dir.mkdir(parents=True)
        files_written = []

        compose_file = self.project_dir / COMPOSE_FILENAME
        compose_data = PROFILE_TEMPLATES[self.profile]["compose"]()
        with open(compose_file, "w") as f:
            yaml.dump(compose_data, f, default_flow_style=False, sort_keys=False)
        files_written.append(compose_file)

        env_file = self.project_dir / ENV_EXAMPLE_FILENAME
        env_file.write_text(render_env_example(self.profile, self.engine))
        files_written.append(env_file)

        readme_file = self.project_dir / "README.md"
        readme_file.write_text(render_readme(self.project_name, self.profile, self.engine))
        files_written.append(readme_file)

        logger.debug("Scaffolded %s project at %s", self.profile.value, self.project_dir)
        return files_written
