"""Chat robot boundary.

The chat framework itself is external. This package models the part the
review-flag command relies on: registering a pattern, receiving a message,
and sending one reply.
"""

from .robot import Robot, Response
from .review_flags import register

__all__ = ["Robot", "Response", "register"]
