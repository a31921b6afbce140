"""review-flags CLI - Command-line interface and shell adapter."""

import logging
import os
import sys
from dotenv import load_dotenv
import click

from reviewflags import __version__
from reviewflags.sdk.config import get_config_file_path, load_settings
from reviewflags.sdk.exceptions import ConfigError
from reviewflags.sdk.flags import ReviewFlag

from .config_commands import config_group as config_module
from .shell import say, shell, commands


# Configure logging at the application level
if not logging.root.handlers:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                        format='%(asctime)s - %(levelname)s - %(message)s')
# Suppress noisy connection logs from urllib3
logging.getLogger('urllib3.connectionpool').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name="reviewflags")
def reviewflags():
    """Review Flags CLI.

    Sets review status labels on GitHub pull requests from chat commands.
    """
    pass


@click.command()
def status():
    """Show the repository, credentials and labels in use."""
    try:
        settings = load_settings(strict=True)
    except ConfigError as e:
        logger.critical(f"Could not load configuration: {e}")
        sys.exit(1)

    click.echo("\n" + "=" * 50)
    click.echo("review-flags Status")
    click.echo("=" * 50)

    click.echo(f"\nConfig file: {get_config_file_path()}")
    click.echo(f"Repository: {settings.repo or '(not set)'}")
    if settings.token:
        click.secho("  ✓ GitHub token configured", fg="green")
    else:
        click.secho("  ✗ GitHub token missing (set GITHUB_TOKEN)", fg="red")
    click.echo(f"API URL: {settings.api_url}")
    click.echo(f"Robot name: {settings.bot_name}")

    click.echo("\nLabels:")
    for flag in ReviewFlag:
        click.echo(f"  r{flag.value}  {settings.labels[flag]}")
    click.echo("\n" + "=" * 50)

    if not settings.token or not settings.repo:
        sys.exit(1)


reviewflags.add_command(status, name='status')
reviewflags.add_command(say, name='say')
reviewflags.add_command(shell, name='shell')
reviewflags.add_command(commands, name='commands')
reviewflags.add_command(config_module, name='config')


def main():
    """Entry point for the CLI."""
    load_dotenv()
    reviewflags()


if __name__ == "__main__":
    main()
