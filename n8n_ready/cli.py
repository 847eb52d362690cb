"""
Command-line interface for n8n-ready.

Provides commands for scaffolding projects, checking host readiness,
and starting or stopping the deployment.
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import __version__
from .compose import (
    ComposeAction,
    ComposeDetector,
    ComposeError,
    ComposeOutcome,
    ComposeRunner,
    ProjectNotFoundError,
)
from .config import ConfigError, Profile, get_project_info, load_settings
from .config.models import DoctorSettings
from .log import setup_logging
from .preflight import CheckStatus, DoctorChecker, DoctorReport, OverallStatus
from .templating import ProjectScaffolder, ScaffoldError

console = Console()

STATUS_ICONS = {
    CheckStatus.SUCCESS: "✅",
    CheckStatus.WARNING: "⚠️ ",
    CheckStatus.ERROR: "❌",
}

STATUS_STYLES = {
    CheckStatus.SUCCESS: "green",
    CheckStatus.WARNING: "yellow",
    CheckStatus.ERROR: "red",
}


def _settings_or_exit(**overrides) -> DoctorSettings:
    try:
        return load_settings(overrides)
    except ConfigError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="n8n-ready")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """
    n8n-ready

    Create, check and run containerized n8n deployments.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)


# ============================================================
# INIT Command
# ============================================================

@cli.command()
@click.argument("project_name")
@click.option(
    "--profile",
    "-p",
    type=str,
    default="local",
    show_default=True,
    help="Environment profile (local or prod)",
)
def init(project_name: str, profile: str):
    """Initialize a new n8n-ready project."""
    project_dir = Path(project_name).resolve()

    try:
        scaffolder = ProjectScaffolder(project_dir, profile)
        console.print(
            f"\n[bold blue]🚀 Initializing n8n-ready project \"{project_name}\" "
            f"with profile \"{profile}\"...[/bold blue]\n"
        )
        scaffolder.create()
    except ScaffoldError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]❌ Failed to initialize project: {e}[/red]")
        sys.exit(1)

    console.print("[green]✅ Project initialized successfully![/green]")
    console.print(f"📁 Project created at: [cyan]{project_dir}[/cyan]")
    console.print(f"📋 Profile: {profile}")
    console.print("\n[bold]🎯 Next steps:[/bold]")
    console.print(f"   cd {project_name}")
    console.print("   cp .env.example .env")
    console.print("   [dim]# Edit .env with your configuration[/dim]")
    console.print("   n8n-ready up")


# ============================================================
# DOCTOR Command
# ============================================================

def print_report(report: DoctorReport) -> None:
    """Render a doctor report to the console."""
    console.print()
    console.print(Panel.fit("🔍 n8n-ready Doctor Report", style="bold blue"))

    for check in report.checks:
        style = STATUS_STYLES[check.status]
        console.print(f"\n{STATUS_ICONS[check.status]} [bold {style}]{check.name}[/bold {style}]")
        console.print(f"   {escape(check.message)}")
        if check.details:
            console.print(f"   [dim]{escape(check.details)}[/dim]")

    console.print("\n" + "═" * 50)
    console.print(f"\n📊 {report.summary()}")

    if report.status == OverallStatus.FAILED:
        console.print("\n[red]❌ Some critical issues found. Please fix them before deploying.[/red]")
    elif report.status == OverallStatus.DEGRADED:
        console.print(
            "\n[yellow]⚠️  Everything looks good, but there are some warnings to consider.[/yellow]"
        )
    else:
        console.print("\n[green]✅ All checks passed! Your system is ready for n8n deployment.[/green]")


@cli.command()
@click.option(
    "--path",
    "project_path",
    type=str,
    default=None,
    help="Path to n8n-ready project directory for additional checks",
)
@click.option(
    "--timeout",
    type=float,
    envvar="N8N_READY_TIMEOUT",
    help="Seconds allowed per command probe and network lookup (or set N8N_READY_TIMEOUT)",
)
@click.option(
    "--ip-service",
    "ip_services",
    multiple=True,
    envvar="N8N_READY_IP_SERVICES",
    help="Public IP echo service URL, repeatable (or set N8N_READY_IP_SERVICES)",
)
def doctor(project_path: Optional[str], timeout: Optional[float], ip_services: Tuple[str, ...]):
    """Check system requirements and configuration."""
    settings = _settings_or_exit(
        command_timeout=timeout,
        network_timeout=timeout,
        public_ip_services=list(ip_services) or None,
    )

    console.print("\n[bold blue]🩺 Running n8n-ready system checks...[/bold blue]")

    checker = DoctorChecker(project_path=project_path, settings=settings)
    report = checker.run()
    print_report(report)

    if not report.passed:
        sys.exit(report.exit_code)


# ============================================================
# UP / DOWN Commands
# ============================================================

def _run_compose(action: ComposeAction, project_path: str, timeout: Optional[float]) -> ComposeOutcome:
    """Run up/down, exiting with status 1 on any failure."""
    settings = _settings_or_exit(compose_timeout=timeout)
    detector = ComposeDetector(timeout=settings.command_timeout)
    runner = ComposeRunner(project_path, detector=detector, timeout=settings.compose_timeout)

    try:
        runner.check_project()
    except ProjectNotFoundError:
        console.print("[red]❌ No docker-compose.yml found in current directory[/red]")
        console.print("💡 Make sure you are in a n8n-ready project directory")
        console.print('💡 Run "n8n-ready init <project-name>" to create a new project')
        sys.exit(1)

    async def _run() -> ComposeOutcome:
        command = await detector.detect()
        if command is not None and command.legacy:
            console.print("[yellow]⚠️  Using legacy docker-compose command[/yellow]")
        return await runner.run(action)

    verb = "start" if action == ComposeAction.UP else "stop"
    try:
        outcome = asyncio.run(_run())
    except ComposeError as e:
        console.print(f"[red]❌ Failed to {verb} services: {escape(str(e))}[/red]")
        sys.exit(1)

    if outcome.warning:
        console.print(f"[yellow]⚠️  Warning:[/yellow] {escape(outcome.warning)}")

    return outcome


@cli.command()
@click.option(
    "--path",
    "project_path",
    type=str,
    default=".",
    help="Project directory (defaults to the current directory)",
)
@click.option(
    "--timeout",
    type=float,
    envvar="N8N_READY_COMPOSE_TIMEOUT",
    help="Seconds allowed for docker compose (or set N8N_READY_COMPOSE_TIMEOUT)",
)
def up(project_path: str, timeout: Optional[float]):
    """Start n8n services using Docker Compose."""
    console.print("\n[bold blue]🚀 Starting n8n services...[/bold blue]\n")

    outcome = _run_compose(ComposeAction.UP, project_path, timeout)
    compose_cmd = outcome.command.display

    console.print("[green]✅ Services started successfully![/green]\n")

    info = get_project_info(project_path)

    console.print("[bold]📋 Project Information:[/bold]")
    console.print(f"   Profile: {info.profile.value}")
    console.print(f"   n8n URL: [cyan]{info.url}[/cyan]")

    if info.profile in (Profile.LOCAL, Profile.PROD):
        console.print("\n[bold]🔗 Access your n8n instance:[/bold]")
        console.print(f"   {info.url}")

    if info.profile == Profile.PROD:
        console.print("\n[bold yellow]⚠️  Production Notes:[/bold yellow]")
        console.print("   • Make sure your domain points to this server")
        console.print("   • Configure SSL/TLS certificates if using HTTPS")
        console.print("   • Check firewall settings for ports 80/443")

    console.print("\n[bold]📊 Useful Commands:[/bold]")
    console.print("   n8n-ready down          [dim]# Stop all services[/dim]")
    console.print(f"   {compose_cmd} logs -f n8n    [dim]# View n8n logs[/dim]")
    console.print(f"   {compose_cmd} ps             [dim]# Check service status[/dim]")


@cli.command()
@click.option(
    "--path",
    "project_path",
    type=str,
    default=".",
    help="Project directory (defaults to the current directory)",
)
@click.option(
    "--timeout",
    type=float,
    envvar="N8N_READY_COMPOSE_TIMEOUT",
    help="Seconds allowed for docker compose (or set N8N_READY_COMPOSE_TIMEOUT)",
)
def down(project_path: str, timeout: Optional[float]):
    """Stop n8n services using Docker Compose."""
    console.print("\n[bold blue]🛑 Stopping n8n services...[/bold blue]\n")

    _run_compose(ComposeAction.DOWN, project_path, timeout)

    console.print("[green]✅ Services stopped successfully![/green]")
    console.print("\n[bold]📊 Data Preservation:[/bold]")
    console.print("   • Database data is preserved in Docker volumes")
    console.print("   • n8n workflows and credentials are safe")
    console.print('   • Run "n8n-ready up" to restart services')


# ============================================================
# Entry Point
# ============================================================

def main():
    cli(obj={})


if __name__ == "__main__":
    main()
