"""review-flags SDK - Review status labels for GitHub pull requests.

Example usage:
    from reviewflags.sdk import GitHubLabelsClient, ReviewFlag, set_review_flag

    client = GitHubLabelsClient(token, "owner/name")
    reply = set_review_flag(client, ReviewFlag.GRANT, "42")
"""

from . import config
from .exceptions import ReviewFlagsError, TransportError, ConfigError
from .flags import ReviewFlag, LabelAction, PlannedAction, DEFAULT_LABELS, make_label_set, plan
from .labels import GitHubLabelsClient, LabelResult
from .review import COMMAND_PATTERN, MESSAGES, ERROR_MESSAGE, dispatch_plan, set_review_flag

__all__ = [
    "config",
    "ReviewFlagsError",
    "TransportError",
    "ConfigError",
    "ReviewFlag",
    "LabelAction",
    "PlannedAction",
    "DEFAULT_LABELS",
    "make_label_set",
    "plan",
    "GitHubLabelsClient",
    "LabelResult",
    "COMMAND_PATTERN",
    "MESSAGES",
    "ERROR_MESSAGE",
    "dispatch_plan",
    "set_review_flag",
]
