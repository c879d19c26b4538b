"""Drive a Terminator over a kill plan, sequentially or concurrently."""

import asyncio
import logging
from typing import TYPE_CHECKING, Dict, List

from .errors import KillTreeError, TaskJoinError
from .models import KillOutcome

if TYPE_CHECKING:
    from ..platforms.base import Terminator

logger = logging.getLogger(__name__)


def dispatch_sequential(plan: List[int], terminator: "Terminator") -> List[KillOutcome]:
    """
    Kill every PID in ``plan`` on the calling thread, in plan order.

    The first hard failure propagates immediately. Outcomes gathered for
    earlier PIDs are discarded even though those kills already happened.

    Args:
        plan: PIDs in execution order (see tree.kill_order)
        terminator: Platform terminator built from the call's Config

    Returns:
        One outcome per PID, in plan order
    """
    outcomes: List[KillOutcome] = []
    for pid in plan:
        outcome = terminator.kill(pid)
        logger.debug(f"Kill outcome for process id {pid}: {outcome.status}", extra={"pid": pid})
        outcomes.append(outcome)
    return outcomes


async def dispatch_concurrent(plan: List[int], terminator: "Terminator") -> List[KillOutcome]:
    """
    Kill every PID in ``plan`` as independent asyncio tasks.

    Each blocking ``terminator.kill`` call runs on a worker thread. All
    tasks are started up front in plan order, so children-before-parents
    is a scheduling hint here, not a barrier.

    A hard failure from any unit is raised as the overall result. Sibling
    units keep running; their outcomes are simply not collected.

    Returns:
        One outcome per PID, in completion order
    """
    order: Dict[asyncio.Task, int] = {}
    for position, pid in enumerate(plan):
        task = asyncio.create_task(asyncio.to_thread(terminator.kill, pid))
        task.add_done_callback(_retrieve_abandoned_result)
        order[task] = position

    outcomes: List[KillOutcome] = []
    pending = set(order)
    while pending:
        done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
        for task in sorted(done, key=order.__getitem__):
            pid = plan[order[task]]
            outcome = _join(task, pid)
            logger.debug(f"Kill outcome for process id {pid}: {outcome.status}", extra={"pid": pid})
            outcomes.append(outcome)
    return outcomes


def _join(task: asyncio.Task, pid: int) -> KillOutcome:
    """Return a finished unit's outcome, translating non-domain failures."""
    if task.cancelled():
        raise TaskJoinError(pid, "task was cancelled")
    error = task.exception()
    if error is None:
        return task.result()
    if isinstance(error, KillTreeError):
        raise error
    raise TaskJoinError(pid, repr(error)) from error


def _retrieve_abandoned_result(task: asyncio.Task) -> None:
    """Mark a unit's exception as retrieved once nobody awaits it anymore."""
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug(f"Kill task finished with error: {error}")
