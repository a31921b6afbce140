import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Response:
    """A matched message and the means to answer it."""
    match: re.Match
    send: Callable[[str], None]


@dataclass
class Listener:
    regex: re.Pattern
    callback: Callable[[Response], None]


@dataclass
class Robot:
    """
    Minimal chat robot that responds to messages addressed to it.

    A message may be prefixed with the robot's name ("reviewbot r+ 42",
    "@reviewbot: r+ 42"). Shell adapters pass messages that are already
    addressed, so the prefix is optional.
    """
    name: str = "reviewbot"
    listeners: List[Listener] = field(default_factory=list)
    commands: List[str] = field(default_factory=list)

    def _respond_regex(self, pattern: str) -> re.Pattern:
        name = re.escape(self.name)
        return re.compile(rf"^\s*(?:@?{name}[:,]?\s+)?(?:{pattern})")

    def respond(self, pattern: str):
        """Register the decorated function as a listener for ``pattern``."""
        def decorator(callback):
            self.listeners.append(Listener(self._respond_regex(pattern), callback))
            return callback
        return decorator

    def add_help(self, *lines: str):
        self.commands.extend(lines)

    def help_commands(self) -> List[str]:
        return [f"{self.name} {line}" for line in self.commands]

    def receive(self, text: str, send: Callable[[str], None]) -> bool:
        """
        Hand a message to every listener whose pattern matches it.

        Args:
            text: Message text
            send: Callable delivering a reply to the originating channel

        Returns:
            True if any listener matched, False if the message was ignored
        """
        matched = False
        for listener in self.listeners:
            match: Optional[re.Match] = listener.regex.search(text)
            if match is None:
                continue
            matched = True
            logger.debug(f"Message {text!r} matched {listener.regex.pattern!r}")
            listener.callback(Response(match=match, send=send))
        if not matched:
            logger.debug(f"Ignoring message {text!r}")
        return matched
