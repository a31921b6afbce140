"""
Test configuration and fixtures shared by all review-flags tests.

This module provides:
- Isolation of the config file and GitHub environment variables
- Fake HTTP responses and sessions for the labels client
"""

import pytest
import requests
from concurrent.futures import Future
from unittest.mock import Mock

from reviewflags.sdk.labels import GitHubLabelsClient


TEST_TOKEN = "test_token"
TEST_REPO = "octo-org/octo-repo"
ISSUES_URL = f"https://api.github.com/repos/{TEST_REPO}/issues"

ENV_VARS = ("GITHUB_TOKEN", "GITHUB_REPO", "HUBOT_GITHUB_TOKEN", "HUBOT_GITHUB_REPO")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Point the config file at an empty temp directory and clear GitHub env vars.

    Returns:
        Path: Location of the (not yet created) config file
    """
    config_file = tmp_path / "config" / "config.yaml"
    monkeypatch.setenv("REVIEWFLAGS_CONFIG_FILE", str(config_file))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return config_file


def make_response(status_code=200, text="[]"):
    """Build a stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    return response


def completed_future(result=None, exception=None) -> Future:
    """Build a Future that is already resolved or failed."""
    future = Future()
    if exception is not None:
        future.set_exception(exception)
    else:
        future.set_result(result)
    return future


@pytest.fixture
def mock_session():
    """requests.Session stand-in whose calls all return HTTP 200."""
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response()
    return session


@pytest.fixture
def client(mock_session):
    """Labels client for TEST_REPO backed by mock_session."""
    labels_client = GitHubLabelsClient(TEST_TOKEN, TEST_REPO, session=mock_session)
    yield labels_client
    labels_client.close()

