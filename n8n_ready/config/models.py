"""
Pydantic models for project and runtime configuration.

These models describe what the doctor and compose commands read from
a project directory, and the knobs that bound external calls.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

# Scheme -> port that is implied by the scheme and left out of URLs
DEFAULT_SCHEME_PORTS = {
    "http": "80",
    "https": "443",
}


class Profile(str, Enum):
    """Deployment profile of a project."""
    LOCAL = "local"
    PROD = "prod"
    UNKNOWN = "unknown"


class EnvValues(BaseModel):
    """Recognized values found in a project's .env file."""

    host: Optional[str] = Field(None, description="N8N_HOST")
    port: Optional[str] = Field(None, description="N8N_PORT")
    protocol: Optional[str] = Field(None, description="N8N_PROTOCOL")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: Optional[str]) -> Optional[str]:
        """Treat anything but a TCP port number as absent."""
        if v is None:
            return None
        v = v.strip()
        if not v.isascii() or not v.isdigit() or not 1 <= int(v) <= 65535:
            return None
        return str(int(v))


class ProjectInfo(BaseModel):
    """Derived view of a project: where n8n will be reachable."""

    profile: Profile = Field(default=Profile.UNKNOWN)
    host: str = Field(default="localhost")
    port: str = Field(default="5678")
    protocol: str = Field(default="http")

    @computed_field
    @property
    def url(self) -> str:
        """Build scheme://host[:port], omitting the scheme's default port."""
        default_port = DEFAULT_SCHEME_PORTS.get(self.protocol.lower())
        if default_port is not None and self.port == default_port:
            return f"{self.protocol}://{self.host}"
        return f"{self.protocol}://{self.host}:{self.port}"


class DoctorSettings(BaseModel):
    """Timeouts and endpoints used by checks and compose invocations."""

    command_timeout: float = Field(
        default=5.0, gt=0, description="Seconds allowed for version probes"
    )
    compose_timeout: float = Field(
        default=600.0, gt=0, description="Seconds allowed for 'up' / 'down'"
    )
    network_timeout: float = Field(
        default=5.0, gt=0, description="Seconds allowed for DNS and public IP lookups"
    )
    public_ip_services: List[str] = Field(
        default_factory=lambda: [
            "https://api.ipify.org",
            "https://icanhazip.com",
        ],
        description="Plain-text public IPv4 services, tried in order",
    )
    bind_host: Optional[str] = Field(
        None, description="Address used for port probes (None = all interfaces)"
    )

    @field_validator("public_ip_services")
    @classmethod
    def validate_services(cls, v: List[str]) -> List[str]:
        """Require at least one http(s) service."""
        if not v:
            raise ValueError("At least one public IP service is required")
        for url in v:
            if not url.startswith(("http://", "https://")):
                raise ValueError(f"Invalid public IP service URL: {url}")
        return v
