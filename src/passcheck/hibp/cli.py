"""
CLI commands for Pwned Passwords lookups.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import json

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from passcheck.config import EngineConfig
from passcheck.hibp.client import PwnedPasswordsClient
from passcheck.hibp.models import RiskLevel

console = Console()


def risk_color(risk: RiskLevel) -> str:
    """Get color for risk level."""
    colors = {
        RiskLevel.SAFE: "green",
        RiskLevel.LOW: "yellow",
        RiskLevel.MEDIUM: "orange3",
        RiskLevel.HIGH: "red",
        RiskLevel.CRITICAL: "bold red",
    }
    return colors.get(risk, "white")


@click.group()
@click.pass_context
def hibp(ctx: click.Context) -> None:
    """Have I Been Pwned - password breach lookups.

    Password checks use k-anonymity: only the first 5 characters of
    the SHA-1 hash are sent to https://api.pwnedpasswords.com.
    """
    ctx.ensure_object(dict)
    ctx.obj.setdefault("console", console)


@hibp.command("password")
@click.option("--password", "-p", help="Password to check (or prompts securely)")
@click.option("--hash", "password_hash", help="SHA-1 hash to check instead")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_password(
    ctx: click.Context,
    password: str | None,
    password_hash: str | None,
    json_output: bool,
) -> None:
    """Check if a password has been exposed in data breaches.

    Lookup failures are reported, but a password is never treated as
    breached unless the API confirms it.

    Example:
        passcheck hibp password
        passcheck hibp password --hash 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8
    """
    if not password and not password_hash:
        password = click.prompt("Password to check", hide_input=True)

    config: EngineConfig = ctx.obj.get("config") or EngineConfig.from_env()

    async def _check():
        async with PwnedPasswordsClient(config) as client:
            if password_hash:
                return await client.check_hash(password_hash)
            else:
                return await client.check_breach(password)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Checking password...", total=None)
            result = asyncio.run(_check())
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
        return

    if result.error:
        console.print(f"[yellow]Breach lookup unavailable: {result.error}[/yellow]")
        raise SystemExit(1)

    color = risk_color(result.risk_level)

    if not result.is_breached:
        console.print(Panel(
            f"[green]Good news![/green] This password has NOT been found in any known data breaches.\n\n"
            f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]",
            title="Password Check Result"
        ))
    else:
        console.print(Panel(
            f"[red]Warning![/red] This password has been seen [bold]{result.occurrences:,}[/bold] times in data breaches!\n\n"
            f"Risk Level: [{color}]{result.risk_level.value.upper()}[/{color}]\n\n"
            f"{result.risk_description}",
            title="Password Check Result"
        ))


@hibp.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show breach lookup configuration."""
    config: EngineConfig = ctx.obj.get("config") or EngineConfig.from_env()

    table = Table(title="Passcheck Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in config.to_dict().items():
        table.add_row(key, str(value))

    console.print(table)

    errors = config.validate()
    if errors:
        console.print("\n[red]Configuration Errors:[/red]")
        for err in errors:
            console.print(f"  - {err}")
    else:
        console.print("\nSet configuration via environment variables:")
        console.print("  PASSCHECK_API_URL=https://api.pwnedpasswords.com")
        console.print("  PASSCHECK_TIMEOUT=10")
        console.print("  PASSCHECK_ADD_PADDING=true")


def add_hibp_commands(main_cli):
    """Add HIBP commands to main CLI."""
    main_cli.add_command(hibp)
