"""Configuration management for review-flags.

Handles loading and saving YAML configuration from ~/.config/review-flags/,
with GitHub credentials taken from the environment when set there.
"""

import copy
import os
import yaml
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigError
from .flags import DEFAULT_LABELS, LabelSet, ReviewFlag, make_label_set
from .labels import DEFAULT_API_URL, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    env_path = os.getenv("REVIEWFLAGS_CONFIG_DIR")
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "review-flags"


def get_config_file_path() -> Path:
    """
    Get the path to the config file, respecting the REVIEWFLAGS_CONFIG_FILE env var.
    """
    env_path = os.getenv("REVIEWFLAGS_CONFIG_FILE")
    if env_path:
        return Path(env_path)
    return get_config_dir() / "config.yaml"


DEFAULT_CONFIG = {
    "github": {
        "repo": None,
        "token": None,
        "api_url": DEFAULT_API_URL,
        "user_agent": DEFAULT_USER_AGENT,
    },
    "labels": {
        "request": None,
        "grant": None,
        "return": None,
    },
    "bot": {
        "name": "reviewbot",
    },
}

# Environment variables checked in order for each setting
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "HUBOT_GITHUB_TOKEN")
REPO_ENV_VARS = ("GITHUB_REPO", "HUBOT_GITHUB_REPO")


def _read_config_file(config_file: Path) -> dict:
    with open(config_file, 'r') as f:
        return yaml.safe_load(f) or {}


def load_config(strict: bool = False) -> dict:
    """Load the configuration from the config file.

    Args:
        strict: Raise ConfigError instead of falling back to defaults when
                the file cannot be parsed.
    """
    config_file = get_config_file_path()
    if not config_file.exists():
        logger.debug(f"Config file not found at {config_file}, using default config.")
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        config = _read_config_file(config_file)
    except (OSError, yaml.YAMLError) as e:
        if strict:
            raise ConfigError(f"Error loading config file {config_file}: {e}") from e
        logger.error(f"Error loading config file {config_file}: {e}")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        if strict:
            raise ConfigError(f"Config file {config_file} must contain a mapping.")
        logger.error(f"Config file {config_file} must contain a mapping, ignoring it.")
        return copy.deepcopy(DEFAULT_CONFIG)

    merged = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), config)
    for section, defaults in DEFAULT_CONFIG.items():
        value = merged.get(section)
        if value is None:
            merged[section] = copy.deepcopy(defaults)
        elif not isinstance(value, dict):
            if strict:
                raise ConfigError(f"Section '{section}' in {config_file} must be a mapping.")
            logger.error(f"Section '{section}' in {config_file} must be a mapping, using defaults.")
            merged[section] = copy.deepcopy(defaults)
    return merged


def save_config(config_data: dict):
    """Save the configuration to the config file."""
    config_file = get_config_file_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(config_file, 'w') as f:
            yaml.safe_dump(config_data, f, default_flow_style=False)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        raise ConfigError(f"Error saving config file {config_file}: {e}") from e


def set_config_value(key: str, value: Any):
    """Set a configuration value using a dot-separated key and save."""
    config_data = load_config()
    keys = key.split('.')
    current_level = config_data
    for i, k in enumerate(keys):
        if i == len(keys) - 1:
            current_level[k] = value
        else:
            if k not in current_level or not isinstance(current_level[k], dict):
                current_level[k] = {}
            current_level = current_level[k]
    save_config(config_data)


def _deep_merge(base: dict, new: dict) -> dict:
    """Recursively merge dictionary `new` into `base`."""
    for k, v in new.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            base[k] = _deep_merge(base[k], v)
        else:
            base[k] = v
    return base


def _first_env(names) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one process."""
    token: Optional[str]
    repo: Optional[str]
    api_url: str
    user_agent: str
    labels: LabelSet
    bot_name: str


def load_settings(strict: bool = False) -> Settings:
    """
    Resolve settings from the environment and the config file.

    GITHUB_TOKEN / GITHUB_REPO win over the file; the HUBOT_-prefixed names
    are accepted as fallbacks. Missing values are not validated.

    Args:
        strict: Raise ConfigError for an unreadable file, a malformed section
                or review labels that are not distinct, instead of falling
                back to defaults

    Returns:
        Settings instance
    """
    config = load_config(strict=strict)
    github = config["github"]
    label_config = config["labels"]

    try:
        labels = make_label_set({
            ReviewFlag.REQUEST: label_config.get("request"),
            ReviewFlag.GRANT: label_config.get("grant"),
            ReviewFlag.RETURN: label_config.get("return"),
        })
    except ValueError as e:
        if strict:
            raise ConfigError(str(e)) from e
        logger.error(f"{e}. Using the default labels.")
        labels = DEFAULT_LABELS

    settings = Settings(
        token=_first_env(TOKEN_ENV_VARS) or github.get("token"),
        repo=_first_env(REPO_ENV_VARS) or github.get("repo"),
        api_url=github.get("api_url") or DEFAULT_API_URL,
        user_agent=github.get("user_agent") or DEFAULT_USER_AGENT,
        labels=labels,
        bot_name=config["bot"].get("name") or "reviewbot",
    )
    logger.debug(f"Loaded settings for repository {settings.repo!r}")
    return settings
