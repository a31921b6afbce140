"""Setting the review flag of a pull request.

Runs the reconciliation plan as concurrent label calls and turns their
combined outcome into a single chat reply.
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, wait
from typing import Iterable, List

from .flags import DEFAULT_LABELS, LabelAction, LabelSet, PlannedAction, ReviewFlag, plan

logger = logging.getLogger(__name__)

# "r", a flag of ?, + or -, a space, then a pull request number
COMMAND_PATTERN = r"r([?+-]) ([0-9]+)"

MESSAGES = {
    ReviewFlag.REQUEST: "I requested a review on pull request #{number}     ◟(๑•͈ᴗ•͈)◞",
    ReviewFlag.GRANT: "Review granted for pull request #{number}     ୧( ⁼̴̶̤̀ω⁼̴̶̤́ )૭",
    ReviewFlag.RETURN: "I returned pull request #{number} for revision     ＿〆(。。)",
}

ERROR_MESSAGE = "I tried modifying that pull request, but something went wrong     ;_;"


def dispatch_plan(client, actions: Iterable[PlannedAction], number) -> List[Future]:
    """Submit one label call per planned action without waiting on any of them."""
    futures = []
    for action in actions:
        if action.action is LabelAction.ADD:
            futures.append(client.add_label(action.label, number))
        else:
            futures.append(client.remove_label(action.label, number))
    return futures


def set_review_flag(client, flag: ReviewFlag, number, labels: LabelSet = DEFAULT_LABELS) -> str:
    """
    Move a pull request to the review state selected by ``flag``.

    HTTP error responses still count as completed calls. Any transport
    failure turns the whole command into the error reply; calls that are
    still running are not cancelled.

    Args:
        client: Labels client exposing add_label/remove_label
        flag: Requested ReviewFlag
        number: Pull request number, as matched in the command text
        labels: Label text per flag

    Returns:
        Reply text for the chat channel
    """
    futures = dispatch_plan(client, plan(flag, labels), number)
    done, _ = wait(futures, return_when=FIRST_EXCEPTION)

    failed = [f for f in done if f.exception() is not None]
    if failed:
        logger.warning(f"{len(failed)} of {len(futures)} label calls failed for pull request #{number}")
        return ERROR_MESSAGE

    logger.info(f"Set review flag {flag.name} on pull request #{number}")
    return MESSAGES[flag].format(number=number)
