"""review-flags MCP Server - Exposes the review-flag command via MCP.

The server uses the same settings as the CLI (environment first, then the
config file) and the same reconciliation as the chat command.
"""

import asyncio
import logging
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from reviewflags.sdk.config import Settings, load_settings
from reviewflags.sdk.flags import ReviewFlag
from reviewflags.sdk.labels import GitHubLabelsClient
from reviewflags.sdk.review import ERROR_MESSAGE, set_review_flag as apply_review_flag

logger = logging.getLogger(__name__)

# Create the MCP server
mcp = FastMCP("review-flags")

_settings: Optional[Settings] = None
_client: Optional[GitHubLabelsClient] = None


def _get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def _get_client() -> GitHubLabelsClient:
    global _client
    if _client is None:
        settings = _get_settings()
        _client = GitHubLabelsClient(
            settings.token,
            settings.repo,
            api_url=settings.api_url,
            user_agent=settings.user_agent,
        )
    return _client


@mcp.tool()
async def set_review_flag(flag: str, number: int) -> dict[str, Any]:
    """
    Set the review status label of a pull request.

    Adds the label for the requested state and removes the other two review
    labels, exactly like the chat commands r?, r+ and r-.

    Args:
        flag: '?' to request a review, '+' to grant it, '-' to return the
              pull request for revision.
        number: The pull request number.

    Returns:
        A dictionary with 'success' and the chat 'message' that would be sent.
    """
    try:
        review_flag = ReviewFlag(flag)
    except ValueError:
        return {"success": False, "error": f"Unknown flag '{flag}'. Use '?', '+' or '-'."}

    if number < 1:
        return {"success": False, "error": f"Invalid pull request number: {number}"}

    # Label calls block until all three finish or one fails
    message = await asyncio.to_thread(
        apply_review_flag, _get_client(), review_flag, number, _get_settings().labels
    )
    if message == ERROR_MESSAGE:
        logger.error(f"Error setting review flag '{flag}' on pull request #{number}")
    return {"success": message != ERROR_MESSAGE, "message": message}


def run_server():
    """Run the MCP server with stdio transport."""
    mcp.run()


if __name__ == "__main__":
    run_server()
