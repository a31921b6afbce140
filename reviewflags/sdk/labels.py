"""GitHub issue label operations.

Each call is submitted to a thread pool and returns a Future, so the label
calls for one command are in flight at the same time.
"""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from .exceptions import TransportError
from .timing import time_api_call

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "GitHubot/1.0.0"
GITHUB_MEDIA_TYPE = "application/vnd.github.v3+json"


@dataclass(frozen=True)
class LabelResult:
    """HTTP outcome of a label call. The status code is not interpreted."""
    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class GitHubLabelsClient:
    """Adds and removes labels on the issues of one repository."""

    def __init__(
        self,
        token: Optional[str],
        repo: Optional[str],
        session: Optional[requests.Session] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        api_url: str = DEFAULT_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        """Initialize the labels client.

        Args:
            token: GitHub token sent in the Authorization header
            repo: Repository in owner/name format
            session: Optional requests session (a new one is created if omitted)
            executor: Optional thread pool the calls run on
            api_url: Base URL of the GitHub REST API
            user_agent: Value of the User-Agent header
        """
        self.token = token
        self.repo = repo
        self.api_url = api_url.rstrip("/")
        self.user_agent = user_agent

        if session is None:
            session = requests.Session()
            # Failed calls are reported, never retried
            adapter = HTTPAdapter(max_retries=0)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        self.session = session

        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=8, thread_name_prefix="reviewflags-labels"
        )

        if not self.token:
            logger.warning("No GitHub token configured. Label calls will be unauthorized.")
        if not self.repo:
            logger.warning("No GitHub repository configured. Label calls will target an invalid URL.")

    @property
    def issues_url(self) -> str:
        return f"{self.api_url}/repos/{self.repo}/issues"

    @property
    def headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Accept": GITHUB_MEDIA_TYPE,
            "User-Agent": self.user_agent,
            "Authorization": f"token {self.token}",
        }

    def add_label(self, label: str, number) -> "Future[LabelResult]":
        """Add a label to an issue or pull request.

        Args:
            label: Label text
            number: Issue or pull request number (int or digit string)

        Returns:
            Future resolving to a LabelResult
        """
        url = f"{self.issues_url}/{number}/labels"
        return self.executor.submit(self._request, "POST", url, [label])

    def remove_label(self, label: str, number) -> "Future[LabelResult]":
        """Remove a label from an issue or pull request.

        The label text is placed in the URL path as-is.

        Args:
            label: Label text
            number: Issue or pull request number (int or digit string)

        Returns:
            Future resolving to a LabelResult
        """
        url = f"{self.issues_url}/{number}/labels/{label}"
        return self.executor.submit(self._request, "DELETE", url)

    @time_api_call
    def _request(self, method: str, url: str, data=None) -> LabelResult:
        body = json.dumps(data) if data is not None else None
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, headers=self.headers, data=body)
        except requests.exceptions.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        result = LabelResult(status=response.status_code, body=response.text)
        if not result.ok:
            logger.warning(f"{method} {url} returned HTTP {result.status}")
        return result

    def close(self):
        """Release the thread pool, if created here, and the session.

        In-flight calls finish before the session is closed.
        """
        if self._owns_executor:
            self.executor.shutdown(wait=True)
        self.session.close()
