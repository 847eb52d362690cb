"""Configuration handling for n8n-ready projects."""

from .models import (
    DoctorSettings,
    EnvValues,
    Profile,
    ProjectInfo,
)
from .loader import (
    ConfigError,
    detect_profile,
    get_project_info,
    load_settings,
    read_env_values,
)

__all__ = [
    "DoctorSettings",
    "EnvValues",
    "Profile",
    "ProjectInfo",
    "ConfigError",
    "detect_profile",
    "get_project_info",
    "load_settings",
    "read_env_values",
]
