"""Modify review flags for GitHub pull requests.

Commands:
  r? <pull_request_number> - removes review labels and sets "review requested"
  r+ <pull_request_number> - removes review labels and sets "review granted"
  r- <pull_request_number> - removes review labels and sets "review returned"
"""

import logging

from ..sdk.flags import DEFAULT_LABELS, LabelSet, ReviewFlag
from ..sdk.review import COMMAND_PATTERN, ERROR_MESSAGE, set_review_flag

logger = logging.getLogger(__name__)


def register(robot, client, labels: LabelSet = DEFAULT_LABELS):
    """Register the review-flag command on ``robot``, using ``client`` for label calls."""
    robot.add_help(*(
        f'r{flag.value} <pull_request_number> - removes review labels and sets "{labels[flag]}"'
        for flag in ReviewFlag
    ))

    @robot.respond(COMMAND_PATTERN)
    def review_flag(response):
        flag, number = response.match.group(1), response.match.group(2)
        logger.debug(f"Review flag command r{flag} for pull request #{number}")
        try:
            reply = set_review_flag(client, ReviewFlag(flag), number, labels)
        except Exception as e:
            # A matched command always gets exactly one reply
            logger.error(f"Review flag command r{flag} {number} failed: {e}", exc_info=True)
            reply = ERROR_MESSAGE
        response.send(reply)

    return review_flag
