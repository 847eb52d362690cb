"""
Template library.

Text templates for files generated by ``n8n-ready init``.
"""

README_TEMPLATE = """# {{project_name}}

An n8n-ready project configured for **{{profile}}** environment.

## Getting Started

1. **Setup environment variables:**
   ```bash
   cp .env.example .env
   ```

   Edit the `.env` file with your specific configuration.

2. **Start the services:**
   ```bash
   n8n-ready up
   ```

3. **Access n8n:**
   - **Local**: http://localhost:5678
   - **Production**: Configure your domain in the environment variables

## Configuration

This project uses Docker Compose to orchestrate the following services:
- **n8n**: Workflow automation platform
- **PostgreSQL**: Database for n8n data persistence
- **Redis**: Queue management for n8n workflows

### Environment Variables

Check `.env.example` for all available configuration options.

## Profile: {{profile}}

This profile is optimized for {{profile_purpose}}:
{{profile_summary}}

## Commands

- `n8n-ready up` - Start all services in background
- `n8n-ready down` - Stop all services
- `n8n-ready doctor --path .` - Check system requirements
- `docker compose logs -f n8n` - View n8n logs
- `docker compose ps` - Show running services

## Backup

{{backup_notes}}

---

Generated with n8n-ready CLI
"""

ENV_EXAMPLE_HEADER = """# n8n-ready environment ({{profile}} profile)
# Copy to .env and adjust before running 'n8n-ready up'
"""

PROFILE_PURPOSE = {
    "local": "local development",
    "prod": "production deployment",
}
