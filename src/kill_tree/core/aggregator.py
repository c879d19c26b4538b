"""Join kill outcomes back to their snapshot records."""

import logging
from typing import Iterable, List

from .models import KillOutcome, Killed, KilledProcess, MaybeAlreadyTerminated, Outcome, RecordMap

logger = logging.getLogger(__name__)


def aggregate(outcomes: Iterable[KillOutcome], records_by_pid: RecordMap) -> List[Outcome]:
    """
    Build the public outcome list.

    ``records_by_pid`` is consumed: each record is popped at most once, so a
    PID can never produce two ``KilledProcess`` entries. A ``Killed`` outcome
    whose record is already gone is dropped, never fabricated.

    Args:
        outcomes: Terminator results in dispatch order
        records_by_pid: Snapshot records keyed by PID (mutated)

    Returns:
        KilledProcess and MaybeAlreadyTerminated entries in dispatch order
    """
    results: List[Outcome] = []
    for outcome in outcomes:
        if isinstance(outcome, Killed):
            record = records_by_pid.pop(outcome.pid, None)
            if record is None:
                logger.debug(f"Process info not found for killed process id {outcome.pid}")
                continue
            results.append(
                KilledProcess(pid=record.pid, parent_pid=record.parent_pid, name=record.name)
            )
        elif isinstance(outcome, MaybeAlreadyTerminated):
            results.append(outcome)
        else:
            raise TypeError(f"Unknown kill outcome: {outcome!r}")
    return results
