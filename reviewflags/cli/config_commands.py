import click
import yaml

from reviewflags.sdk import config
from reviewflags.sdk.exceptions import ConfigError
from reviewflags.sdk.flags import ReviewFlag, make_label_set

# Keys that may be set from the command line. The token is deliberately absent:
# it is read from GITHUB_TOKEN.
ALLOWED_CONFIG = {
    "github.repo",
    "github.api_url",
    "github.user_agent",
    "labels.request",
    "labels.grant",
    "labels.return",
    "bot.name",
}


def _check_distinct_labels(key, value):
    """Reject a label that another review flag already uses."""
    try:
        label_config = dict(config.load_config(strict=True)["labels"])
    except ConfigError as e:
        raise click.ClickException(str(e))
    label_config[key.split(".", 1)[1]] = value
    try:
        make_label_set({flag: label_config.get(flag.name.lower()) for flag in ReviewFlag})
    except ValueError as e:
        raise click.UsageError(f"Invalid value '{value}' for key '{key}'. {e}.")


@click.group()
def config_group():
    """Commands for managing review-flags configuration."""
    pass


@config_group.command('view')
def view_config():
    """Displays the current review-flags configuration."""
    config_data = config.load_config()
    github = config_data["github"]
    if github.get("token"):
        github["token"] = "********"
    click.echo(yaml.safe_dump(config_data, default_flow_style=False))


@config_group.command('set')
@click.argument('key')
@click.argument('value')
def set_config(key, value):
    """
    Sets a configuration value for a supported key.

    \b
    Supported Keys:
      - github.repo: Repository in owner/name format.
      - github.api_url: Base URL of the GitHub REST API.
      - github.user_agent: User-Agent header sent with label calls.
      - labels.request, labels.grant, labels.return: Label text per flag.
      - bot.name: Name the robot answers to.

    \b
    Examples:
      reviewflags config set github.repo octo-org/octo-repo
      reviewflags config set labels.grant "r+ granted"
    """
    if key not in ALLOWED_CONFIG:
        raise click.UsageError(f"Configuration key '{key}' is not supported.")

    if key == "github.repo" and value.count("/") != 1:
        raise click.UsageError(f"Invalid value '{value}' for key '{key}'. Expected owner/name.")

    if key.startswith("labels."):
        _check_distinct_labels(key, value)

    try:
        config.set_config_value(key, value)
    except ConfigError as e:
        raise click.ClickException(str(e))
    click.echo(f"✓ Set '{key}' to: {value}")
