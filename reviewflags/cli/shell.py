"""Shell adapter - runs the chat robot against terminal input."""

import logging
from contextlib import contextmanager

import click

from reviewflags.chat import Robot, register
from reviewflags.sdk.config import load_settings
from reviewflags.sdk.labels import GitHubLabelsClient

logger = logging.getLogger(__name__)


@contextmanager
def shell_robot(settings=None):
    """
    Build a robot with the review-flag command registered.

    Yields:
        Robot instance; its labels client is closed on exit
    """
    settings = settings or load_settings()
    client = GitHubLabelsClient(
        settings.token,
        settings.repo,
        api_url=settings.api_url,
        user_agent=settings.user_agent,
    )
    robot = Robot(name=settings.bot_name)
    register(robot, client, settings.labels)
    try:
        yield robot
    finally:
        client.close()


def echo_reply(text: str):
    click.echo(text)


@click.command()
@click.argument('message', nargs=-1, required=True)
def say(message):
    """Send one MESSAGE to the robot and print its reply.

    \b
    Examples:
      reviewflags say r+ 42
      reviewflags say "r? 7"
    """
    text = " ".join(message)
    with shell_robot() as robot:
        if not robot.receive(text, echo_reply):
            logger.debug(f"No command matched {text!r}")


@click.command()
def shell():
    """Read messages from stdin, one per line, and print the replies."""
    with shell_robot() as robot:
        stdin = click.get_text_stream('stdin')
        for line in stdin:
            text = line.strip()
            if text:
                robot.receive(text, echo_reply)


@click.command()
def commands():
    """List the chat commands the robot responds to."""
    with shell_robot() as robot:
        for line in robot.help_commands():
            click.echo(line)
