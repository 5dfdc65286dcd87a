"""
Passcheck CLI - Main entry point for the command-line interface.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from passcheck import __version__
from passcheck.config import EngineConfig

console = Console()


def setup_logging(verbose: bool) -> None:
    """Route package logs through rich when verbose output is requested."""
    if not verbose:
        return

    logger = logging.getLogger("passcheck")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG)


@click.group()
@click.version_option(version=__version__, prog_name="passcheck")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Passcheck - Password Strength and Breach Exposure Utilities

    Score passwords, check them against the Have I Been Pwned corpus
    without revealing them, and generate strong replacements.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["config"] = EngineConfig.from_env()


# Import and register subcommand groups
from passcheck.strength.cli import add_strength_commands
from passcheck.hibp.cli import add_hibp_commands

add_strength_commands(main)
add_hibp_commands(main)


if __name__ == "__main__":
    main()
