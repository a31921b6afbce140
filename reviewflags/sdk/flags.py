"""Review flags and label reconciliation.

A review flag selects exactly one of three review states. Moving a pull
request into a state means adding that state's label and removing the other
two, whatever labels the pull request carried before.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

logger = logging.getLogger(__name__)


class ReviewFlag(Enum):
    """Review states, valued by the character that triggers them in chat."""
    REQUEST = "?"
    GRANT = "+"
    RETURN = "-"


class LabelAction(Enum):
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class PlannedAction:
    """One label mutation needed to reach a review state."""
    label: str
    action: LabelAction


LabelSet = Mapping[ReviewFlag, str]

DEFAULT_LABELS: LabelSet = MappingProxyType({
    ReviewFlag.REQUEST: "review requested",
    ReviewFlag.GRANT: "review granted",
    ReviewFlag.RETURN: "review returned",
})


def make_label_set(overrides: Optional[Mapping[ReviewFlag, str]] = None) -> LabelSet:
    """
    Build a read-only label set from the defaults plus per-flag overrides.

    Args:
        overrides: Optional mapping of flag to label text. Empty or None
                   values keep the default label for that flag.

    Returns:
        Read-only mapping with one distinct label per flag

    Raises:
        ValueError: If two flags would share the same label text
    """
    labels = dict(DEFAULT_LABELS)
    for flag, text in (overrides or {}).items():
        if text:
            labels[ReviewFlag(flag)] = str(text)

    # plan() needs one add and two removes of three different labels
    if len(set(labels.values())) != len(labels):
        shown = ", ".join(f"r{flag.value}={text!r}" for flag, text in labels.items())
        raise ValueError(f"Review labels must be distinct, got {shown}")
    return MappingProxyType(labels)


def plan(flag, labels: LabelSet = DEFAULT_LABELS) -> FrozenSet[PlannedAction]:
    """
    Compute the label mutations that put a pull request in the given state.

    The label bound to ``flag`` is added and every other label is removed.
    A flag that is not in ``labels`` produces removals only.

    Args:
        flag: The requested ReviewFlag
        labels: Label text per flag

    Returns:
        Frozen set of PlannedAction, one per label
    """
    actions = frozenset(
        PlannedAction(label_text, LabelAction.ADD if label_flag == flag else LabelAction.REMOVE)
        for label_flag, label_text in labels.items()
    )
    logger.debug(f"Planned {len(actions)} label actions for flag {flag!r}")
    return actions
