"""
Unit tests for the GitHub labels client.

HTTP traffic goes through a mocked requests.Session.
"""

import os
import sys
from concurrent.futures import ThreadPoolExecutor

import pytest
import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from conftest import ISSUES_URL, TEST_REPO, make_response

from reviewflags.sdk.exceptions import TransportError
from reviewflags.sdk.labels import GitHubLabelsClient, LabelResult


EXPECTED_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": "GitHubot/1.0.0",
    "Authorization": "token test_token",
}


class TestRequests:
    """Tests for the calls sent to GitHub."""

    def test_add_label(self, client, mock_session):
        result = client.add_label("review granted", "42").result(timeout=5)

        mock_session.request.assert_called_once_with(
            "POST", f"{ISSUES_URL}/42/labels",
            headers=EXPECTED_HEADERS, data='["review granted"]',
        )
        assert result == LabelResult(status=200, body="[]")

    def test_remove_label(self, client, mock_session):
        client.remove_label("review requested", "42").result(timeout=5)

        mock_session.request.assert_called_once_with(
            "DELETE", f"{ISSUES_URL}/42/labels/review requested",
            headers=EXPECTED_HEADERS, data=None,
        )

    def test_number_may_be_int(self, client, mock_session):
        client.add_label("review granted", 7).result(timeout=5)

        assert mock_session.request.call_args.args[1] == f"{ISSUES_URL}/7/labels"

    def test_custom_api_url_and_user_agent(self, mock_session):
        custom = GitHubLabelsClient(
            "t", TEST_REPO, session=mock_session,
            api_url="https://github.example.com/api/v3/", user_agent="reviewbot/2.0",
        )
        try:
            custom.add_label("review granted", "1").result(timeout=5)
        finally:
            custom.close()

        args, kwargs = mock_session.request.call_args
        assert args[1] == f"https://github.example.com/api/v3/repos/{TEST_REPO}/issues/1/labels"
        assert kwargs["headers"]["User-Agent"] == "reviewbot/2.0"


class TestResults:
    """Tests for how responses and failures are reported."""

    @pytest.mark.parametrize("status", [200, 201, 404, 422, 500])
    def test_any_http_response_resolves(self, client, mock_session, status):
        mock_session.request.return_value = make_response(status, '{"message": "x"}')

        result = client.remove_label("review returned", "42").result(timeout=5)

        assert result.status == status
        assert result.body == '{"message": "x"}'
        assert result.ok is (status < 300)

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("Network error"),
        requests.exceptions.Timeout("timed out"),
    ])
    def test_transport_failure_raises(self, client, mock_session, error):
        mock_session.request.side_effect = error

        future = client.add_label("review granted", "42")

        with pytest.raises(TransportError) as exc:
            future.result(timeout=5)
        assert exc.value.__cause__ is error

    def test_no_retries(self):
        labels_client = GitHubLabelsClient("t", TEST_REPO)
        try:
            adapter = labels_client.session.get_adapter("https://api.github.com")
            assert adapter.max_retries.total == 0
        finally:
            labels_client.close()


class TestLifecycle:
    """Tests for client setup and shutdown."""

    def test_missing_credentials_still_builds_requests(self, mock_session):
        labels_client = GitHubLabelsClient(None, None, session=mock_session)
        try:
            labels_client.add_label("review granted", "1").result(timeout=5)
        finally:
            labels_client.close()

        args, kwargs = mock_session.request.call_args
        assert args[1] == "https://api.github.com/repos/None/issues/1/labels"
        assert kwargs["headers"]["Authorization"] == "token None"

    def test_close_leaves_injected_executor_running(self, mock_session):
        executor = ThreadPoolExecutor(max_workers=1)
        labels_client = GitHubLabelsClient("t", TEST_REPO, session=mock_session, executor=executor)

        labels_client.close()

        assert executor.submit(lambda: "still running").result(timeout=5) == "still running"
        executor.shutdown()
        mock_session.close.assert_called_once()
