"""Child index construction and kill plan resolution."""

import logging
from collections import deque
from typing import Callable, Iterable, List

from .models import ChildIndex, ProcessRecord, RecordMap

logger = logging.getLogger(__name__)

# Returns True when a record must not contribute a parent -> child edge
ChildIndexFilter = Callable[[ProcessRecord], bool]


def no_filter(record: ProcessRecord) -> bool:
    return False


def build_child_index(
    records: Iterable[ProcessRecord],
    index_filter: ChildIndexFilter = no_filter,
) -> ChildIndex:
    """Map each parent PID to its child PIDs, sorted ascending.

    Sorting makes traversal reproducible; the OS lists processes in no
    particular order.
    """
    index: ChildIndex = {}
    for record in records:
        if index_filter(record):
            continue
        index.setdefault(record.parent_pid, []).append(record.pid)
    for children in index.values():
        children.sort()
    return index


def build_record_map(records: Iterable[ProcessRecord]) -> RecordMap:
    """Map each PID to its snapshot record."""
    return {record.pid: record for record in records}


def resolve_kill_plan(
    target_pid: int,
    index: ChildIndex,
    include_target: bool = True,
) -> List[int]:
    """
    Breadth-first walk from ``target_pid`` over ``index``.

    The target does not have to be present in the snapshot; an exited
    target still yields ``[target_pid]`` and is reconciled when the
    terminator reports it as already gone.

    Args:
        target_pid: Root of the tree
        index: Parent -> children map from build_child_index
        include_target: Whether the root itself is part of the plan

    Returns:
        PIDs in discovery order (every parent before its children)
    """
    discovered: List[int] = []
    visited = {target_pid}
    queue = deque([target_pid])
    while queue:
        pid = queue.popleft()
        if pid == target_pid and not include_target:
            logger.debug(f"Skipping target process id {pid} (include_target=False)")
        else:
            discovered.append(pid)
        for child in index.get(pid, ()):
            # A self-parented entry that slipped past the filter would loop forever
            if child in visited:
                continue
            visited.add(child)
            queue.append(child)
    return discovered


def kill_order(plan: List[int]) -> List[int]:
    """Execution order for a plan: descendants before their ancestors."""
    return list(reversed(plan))
