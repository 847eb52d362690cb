"""
Project configuration reader.

Extracts the few values the tool needs from docker-compose.yml and .env
without parsing either file as a document. Missing or unreadable files
fall back to defaults so a doctor run never aborts on optional files.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from .defaults import (
    COMPOSE_FILENAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    ENV_FILENAME,
    PROD_DEFAULT_PORT,
    PROD_DEFAULT_PROTOCOL,
    PROD_NETWORK_MARKERS,
)
from .models import DoctorSettings, EnvValues, Profile, ProjectInfo

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# .env keys -> EnvValues field
ENV_KEYS = {
    "N8N_HOST": "host",
    "N8N_PORT": "port",
    "N8N_PROTOCOL": "protocol",
}


class ConfigError(Exception):
    """Configuration loading or validation error."""
    pass


def read_text(file_path: PathLike) -> Optional[str]:
    """Read a file, returning None when it is missing or unreadable."""
    path = Path(file_path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("%s not found, using defaults", path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s, using defaults: %s", path, e)
    return None


def has_production_markers(compose_content: str) -> bool:
    """Check whether compose text declares the production network."""
    return all(marker in compose_content for marker in PROD_NETWORK_MARKERS)


def detect_profile(project_path: PathLike) -> Profile:
    """
    Classify a project as local or prod from its compose file.

    Args:
        project_path: Project directory

    Returns:
        Profile.PROD or Profile.LOCAL, Profile.UNKNOWN when the compose
        file cannot be read
    """
    content = read_text(Path(project_path) / COMPOSE_FILENAME)
    if content is None:
        return Profile.UNKNOWN

    profile = Profile.PROD if has_production_markers(content) else Profile.LOCAL
    logger.debug("Detected profile '%s' for %s", profile.value, project_path)
    return profile


def parse_env_values(content: str) -> EnvValues:
    """
    Extract N8N_HOST, N8N_PORT and N8N_PROTOCOL from .env text.

    A port that is not a number in 1..65535 is dropped so the default applies.
    """
    values: Dict[str, str] = {}

    for key, field_name in ENV_KEYS.items():
        match = re.search(rf"^{key}=(.+)$", content, re.MULTILINE)
        if not match:
            continue
        value = match.group(1).strip()
        if value:
            values[field_name] = value

    return EnvValues(**values)


def read_env_values(project_path: PathLike) -> EnvValues:
    """Read recognized values from the project's .env file."""
    content = read_text(Path(project_path) / ENV_FILENAME)
    if content is None:
        return EnvValues()
    return parse_env_values(content)


def get_project_info(project_path: PathLike) -> ProjectInfo:
    """
    Derive profile, host, port, protocol and URL for a project.

    Args:
        project_path: Project directory

    Returns:
        ProjectInfo built from the current files on disk
    """
    profile = detect_profile(project_path)

    port = DEFAULT_PORT
    protocol = DEFAULT_PROTOCOL
    if profile == Profile.PROD:
        port = PROD_DEFAULT_PORT
        protocol = PROD_DEFAULT_PROTOCOL

    env = read_env_values(project_path)

    return ProjectInfo(
        profile=profile,
        host=env.host or DEFAULT_HOST,
        port=env.port or port,
        protocol=env.protocol or protocol,
    )


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> DoctorSettings:
    """
    Build runtime settings, ignoring overrides that are None.

    Raises:
        ConfigError: if an override is invalid
    """
    data = {k: v for k, v in (overrides or {}).items() if v is not None}
    try:
        return DoctorSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}")
