"""
Default configuration values and project templates.

Provides the per-profile port sets, .env fallbacks, and the files
written by ``n8n-ready init``.
"""

from typing import Any, Dict, List

from .models import Profile

COMPOSE_FILENAME = "docker-compose.yml"
ENV_FILENAME = ".env"
ENV_EXAMPLE_FILENAME = ".env.example"

# Fallbacks when .env is missing or a key is absent
DEFAULT_HOST = "localhost"
DEFAULT_PORT = "5678"
DEFAULT_PROTOCOL = "http"

# Production projects sit behind a TLS reverse proxy
PROD_DEFAULT_PORT = "443"
PROD_DEFAULT_PROTOCOL = "https"

LOOPBACK_HOSTS = ("localhost", "127.0.0.1")

# Ports that must be free before 'up', per profile
PROFILE_PORTS: Dict[Profile, List[int]] = {
    Profile.LOCAL: [5678, 5432, 6379],  # n8n, PostgreSQL, Redis
    Profile.PROD: [80, 443],
}

# Substrings that mark a compose file as production-shaped
PROD_NETWORK_MARKERS = ("networks:", "n8n_network")


def get_ports_for_profile(profile: Profile) -> List[int]:
    """Get the ports checked for a profile (empty for unknown)."""
    return list(PROFILE_PORTS.get(profile, []))


def _n8n_environment() -> Dict[str, str]:
    return {
        "N8N_HOST": "${N8N_HOST}",
        "N8N_PORT": "5678",
        "N8N_PROTOCOL": "${N8N_PROTOCOL}",
        "WEBHOOK_URL": "${N8N_PROTOCOL}://${N8N_HOST}/",
        "DB_TYPE": "postgresdb",
        "DB_POSTGRESDB_HOST": "postgres",
        "DB_POSTGRESDB_PORT": "5432",
        "DB_POSTGRESDB_DATABASE": "${POSTGRES_DB}",
        "DB_POSTGRESDB_USER": "${POSTGRES_USER}",
        "DB_POSTGRESDB_PASSWORD": "${POSTGRES_PASSWORD}",
        "QUEUE_BULL_REDIS_HOST": "redis",
        "N8N_ENCRYPTION_KEY": "${N8N_ENCRYPTION_KEY}",
    }


def get_local_compose() -> Dict[str, Any]:
    """Get the compose definition for local development."""
    return {
        "services": {
            "n8n": {
                "image": "n8nio/n8n:latest",
                "restart": "unless-stopped",
                "ports": ["5678:5678"],
                "env_file": [ENV_FILENAME],
                "environment": _n8n_environment(),
                "volumes": ["n8n_data:/home/node/.n8n"],
                "depends_on": ["postgres", "redis"],
            },
            "postgres": {
                "image": "postgres:16-alpine",
                "restart": "unless-stopped",
                "ports": ["5432:5432"],
                "environment": {
                    "POSTGRES_DB": "${POSTGRES_DB}",
                    "POSTGRES_USER": "${POSTGRES_USER}",
                    "POSTGRES_PASSWORD": "${POSTGRES_PASSWORD}",
                },
                "volumes": ["postgres_data:/var/lib/postgresql/data"],
            },
            "redis": {
                "image": "redis:7-alpine",
                "restart": "unless-stopped",
                "ports": ["6379:6379"],
            },
        },
        "volumes": {
            "n8n_data": {},
            "postgres_data": {},
        },
    }


def get_prod_compose() -> Dict[str, Any]:
    """Get the compose definition for a production host."""
    network = ["n8n_network"]
    healthcheck = {
        "interval": "30s",
        "timeout": "10s",
        "retries": 5,
    }
    return {
        "services": {
            "caddy": {
                "image": "caddy:2-alpine",
                "restart": "always",
                "ports": ["80:80", "443:443"],
                "command": "caddy reverse-proxy --from ${N8N_HOST} --to n8n:5678",
                "volumes": ["caddy_data:/data"],
                "depends_on": ["n8n"],
                "networks": network,
            },
            "n8n": {
                "image": "n8nio/n8n:latest",
                "restart": "always",
                "env_file": [ENV_FILENAME],
                "environment": _n8n_environment(),
                "volumes": ["./n8n_data:/home/node/.n8n"],
                "depends_on": ["postgres", "redis"],
                "networks": network,
            },
            "postgres": {
                "image": "postgres:16-alpine",
                "restart": "always",
                "environment": {
                    "POSTGRES_DB": "${POSTGRES_DB}",
                    "POSTGRES_USER": "${POSTGRES_USER}",
                    "POSTGRES_PASSWORD": "${POSTGRES_PASSWORD}",
                },
                "volumes": ["postgres_data:/var/lib/postgresql/data"],
                "healthcheck": dict(
                    healthcheck,
                    test=["CMD-SHELL", "pg_isready -U ${POSTGRES_USER}"],
                ),
                "networks": network,
            },
            "redis": {
                "image": "redis:7-alpine",
                "restart": "always",
                "healthcheck": dict(healthcheck, test=["CMD", "redis-cli", "ping"]),
                "networks": network,
            },
        },
        "volumes": {
            "postgres_data": {},
            "caddy_data": {},
        },
        "networks": {
            "n8n_network": {"driver": "bridge"},
        },
    }


def get_env_example(profile: Profile) -> Dict[str, str]:
    """Get the .env.example values for a profile."""
    if profile == Profile.PROD:
        connection = {
            "N8N_HOST": "n8n.example.com",
            "N8N_PORT": PROD_DEFAULT_PORT,
            "N8N_PROTOCOL": PROD_DEFAULT_PROTOCOL,
        }
    else:
        connection = {
            "N8N_HOST": DEFAULT_HOST,
            "N8N_PORT": DEFAULT_PORT,
            "N8N_PROTOCOL": DEFAULT_PROTOCOL,
        }

    return {
        **connection,
        "N8N_ENCRYPTION_KEY": "change-me",
        "POSTGRES_DB": "n8n",
        "POSTGRES_USER": "n8n",
        "POSTGRES_PASSWORD": "change-me",
    }


PROFILE_TEMPLATES = {
    Profile.LOCAL: {
        "compose": get_local_compose,
        "summary": [
            "n8n accessible on localhost:5678",
            "Development-friendly logging",
            "Local data persistence",
        ],
        "backup": "For local development, data is persisted in local volumes.",
    },
    Profile.PROD: {
        "compose": get_prod_compose,
        "summary": [
            "SSL/TLS configuration ready",
            "Production-grade security settings",
            "Persistent volumes for data safety",
            "Health checks enabled",
        ],
        "backup": (
            "For production deployments, ensure you backup:\n"
            "- PostgreSQL database: `docker compose exec postgres pg_dump -U n8n n8n > backup.sql`\n"
            "- n8n data volume: Located at `./n8n_data`"
        ),
    },
}
