"""
CLI commands for password strength checks and generation.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.markup import escape

from passcheck.config import EngineConfig
from passcheck.engine import evaluate_many, evaluate_with_breach
from passcheck.hibp.client import PwnedPasswordsClient
from passcheck.strength.generator import DEFAULT_LENGTH, InvalidLengthError, generate
from passcheck.strength.models import Category, Verdict
from passcheck.strength.scorer import evaluate, merge_verdict

console = Console()


def category_color(category: Category) -> str:
    """Get rich color for a strength category."""
    colors = {
        Category.WEAK: "red",
        Category.MODERATE: "yellow",
        Category.STRONG: "green",
    }
    return colors.get(category, "white")


def get_config(ctx: click.Context) -> EngineConfig:
    return (ctx.obj or {}).get("config") or EngineConfig.from_env()


def run_verdicts(passwords: list[str], config: EngineConfig, offline: bool) -> list[Verdict]:
    """Evaluate passwords, with or without the breach lookup."""
    if offline:
        return [merge_verdict(evaluate(p)) for p in passwords]

    async def _check():
        async with PwnedPasswordsClient(config) as client:
            if len(passwords) == 1:
                return [await evaluate_with_breach(passwords[0], client)]
            return await evaluate_many(passwords, client)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Checking {len(passwords)} password(s)...", total=None)
        try:
            return asyncio.run(_check())
        except ValueError as e:
            raise click.ClickException(str(e)) from e


def print_verdict(verdict: Verdict, title: str = "Password Strength") -> None:
    color = category_color(verdict.category)

    lines = [
        f"Strength: [{color}]{verdict.category.value.upper()}[/{color}] (score {verdict.score})",
    ]
    if verdict.is_breached:
        lines.append(f"[red]Exposed in {verdict.breach_count:,} data breaches[/red]")
    if verdict.feedback:
        lines.append("")
        lines.append("[bold]Suggestions:[/bold]")
        lines.extend(f"  - {hint}" for hint in verdict.feedback)

    console.print(Panel("\n".join(lines), title=title))


# =============================================================================
# Strength Checking
# =============================================================================

@click.command("check")
@click.option("--password", "-p", help="Password to check (or prompts securely)")
@click.option("--offline", is_flag=True, help="Skip the breach lookup")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_strength(
    ctx: click.Context,
    password: str | None,
    offline: bool,
    json_output: bool,
) -> None:
    """Score a password and check it against known breaches.

    Example:
        passcheck check
        passcheck check --offline -p 'correct horse battery staple'
    """
    if password is None:
        password = click.prompt("Password to check", hide_input=True, default="", show_default=False)

    if not password:
        console.print("[yellow]Nothing to check[/yellow]")
        return

    verdict = run_verdicts([password], get_config(ctx), offline)[0]

    if json_output:
        click.echo(json.dumps(verdict.to_dict(), indent=2))
        return

    print_verdict(verdict)


@click.command("batch")
@click.argument("passwords_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--offline", is_flag=True, help="Skip the breach lookup")
@click.option("--output", "-o", type=click.Path(), help="Output file for results")
@click.pass_context
def check_batch(
    ctx: click.Context,
    passwords_file: str,
    offline: bool,
    output: str | None,
) -> None:
    """Check multiple passwords from a file.

    File should contain one password per line. Passwords are never
    echoed; results are listed by line number.

    Example:
        passcheck batch passwords.txt --output results.json
    """
    lines = Path(passwords_file).read_text().splitlines()
    items = [(number, line) for number, line in enumerate(lines, start=1) if line]

    if not items:
        console.print("[yellow]No passwords found in file[/yellow]")
        return

    console.print(f"Checking {len(items)} password(s)...")

    verdicts = run_verdicts([p for _, p in items], get_config(ctx), offline)

    # Summary
    breached = [v for v in verdicts if v.is_breached]
    console.print(f"\n[bold]Results:[/bold] {len(breached)}/{len(verdicts)} passwords found in breaches")

    table = Table(title="Batch Check Results")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Strength")
    table.add_column("Score", justify="right")
    table.add_column("Breaches", justify="right")

    for (number, _), verdict in zip(items, verdicts):
        color = category_color(verdict.category)
        table.add_row(
            str(number),
            f"[{color}]{verdict.category.value}[/{color}]",
            str(verdict.score),
            f"[red]{verdict.breach_count:,}[/red]" if verdict.is_breached else "-",
        )

    console.print(table)

    # Distribution
    console.print("\n[bold]Strength Distribution:[/bold]")
    for category in Category:
        count = sum(1 for v in verdicts if v.category == category)
        color = category_color(category)
        console.print(f"  [{color}]{category.value.upper()}[/{color}]: {count}")

    if output:
        output_data = [
            {"line": number, "result": verdict.to_dict()}
            for (number, _), verdict in zip(items, verdicts)
        ]
        Path(output).write_text(json.dumps(output_data, indent=2))
        console.print(f"\n[green]Results saved to {output}[/green]")


# =============================================================================
# Generation
# =============================================================================

@click.command("generate")
@click.option("--length", "-l", type=int, default=DEFAULT_LENGTH, show_default=True, help="Password length")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, show_default=True, help="Number of passwords")
@click.option("--check", "run_check", is_flag=True, help="Also score and breach-check each password")
@click.pass_context
def generate_passwords(
    ctx: click.Context,
    length: int,
    count: int,
    run_check: bool,
) -> None:
    """Generate strong random passwords.

    Example:
        passcheck generate
        passcheck generate --length 24 --count 5 --check
    """
    try:
        passwords = [generate(length) for _ in range(count)]
    except InvalidLengthError as e:
        raise click.BadParameter(str(e), param_hint="'--length'") from e

    if not run_check:
        for password in passwords:
            click.echo(password)
        return

    verdicts = run_verdicts(passwords, get_config(ctx), offline=False)

    table = Table(title="Generated Passwords")
    table.add_column("Password", style="cyan")
    table.add_column("Strength")
    table.add_column("Breached", justify="center")

    for password, verdict in zip(passwords, verdicts):
        color = category_color(verdict.category)
        table.add_row(
            escape(password),
            f"[{color}]{verdict.category.value}[/{color}] ({verdict.score})",
            "[red]Yes[/red]" if verdict.is_breached else "[green]No[/green]",
        )

    console.print(table)


def add_strength_commands(main_cli):
    """Add strength commands to main CLI."""
    main_cli.add_command(check_strength)
    main_cli.add_command(check_batch)
    main_cli.add_command(generate_passwords)
