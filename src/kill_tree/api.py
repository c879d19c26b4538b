"""Public entry points: kill a process and everything it spawned."""

import logging
import os
from typing import List, Optional

from .core.aggregator import aggregate
from .core.config import Config
from .core.dispatcher import dispatch_concurrent, dispatch_sequential
from .core.models import Outcome, ProcessRecord
from .core.tree import build_child_index, build_record_map, kill_order, resolve_kill_plan
from .platforms import Platform, current_platform

logger = logging.getLogger(__name__)


def get_available_max_process_id(platform: Optional[Platform] = None) -> int:
    """Highest PID the platform can hand out.

    Linux 0x400000 (4194304), macOS 99998, Windows 0xFFFFFFFF.
    """
    platform = platform or current_platform()
    return platform.available_max_process_id


def _plan(
    process_id: int,
    config: Config,
    platform: Platform,
    records: List[ProcessRecord],
) -> List[int]:
    index = build_child_index(records, platform.child_index_filter)
    plan = kill_order(resolve_kill_plan(process_id, index, config.include_target))
    logger.info(
        f"Killing {len(plan)} process(es) in tree of process id {process_id}",
        extra={"pid": process_id},
    )
    return plan


def kill_tree(process_id: int, *, platform: Optional[Platform] = None) -> List[Outcome]:
    """Kill ``process_id`` and all of its descendants with the default Config (SIGTERM)."""
    return kill_tree_with_config(process_id, Config(), platform=platform)


def kill_tree_with_config(
    process_id: int,
    config: Optional[Config] = None,
    *,
    platform: Optional[Platform] = None,
) -> List[Outcome]:
    """
    Kill a process tree on the calling thread, children before parents.

    Args:
        process_id: Root of the tree
        config: Signal and include_target settings (default: Config())
        platform: Collaborators to use (default: the running OS)

    Returns:
        One outcome per process, in kill order

    Raises:
        InvalidProcessIdError: Before any enumeration, for reserved/out-of-range PIDs
        InvalidSignalNameError: Before any kill, for an unknown signal name
        KillTreeError: For any other hard failure; no retries are attempted
    """
    config = config or Config()
    platform = platform or current_platform()

    platform.validate_process_id(process_id)
    terminator = platform.make_terminator(config)
    records = platform.directory.get_process_records()

    plan = _plan(process_id, config, platform, records)
    outcomes = dispatch_sequential(plan, terminator)
    return aggregate(outcomes, build_record_map(records))


async def kill_tree_async(process_id: int, *, platform: Optional[Platform] = None) -> List[Outcome]:
    """Async counterpart of kill_tree."""
    return await kill_tree_with_config_async(process_id, Config(), platform=platform)


async def kill_tree_with_config_async(
    process_id: int,
    config: Optional[Config] = None,
    *,
    platform: Optional[Platform] = None,
) -> List[Outcome]:
    """
    Kill a process tree with concurrent kill calls.

    Every PID is signaled as its own task; outcomes come back in completion
    order. On a hard failure, kills already dispatched are not retracted.
    """
    config = config or Config()
    platform = platform or current_platform()

    platform.validate_process_id(process_id)
    terminator = platform.make_terminator(config)
    records = await platform.directory.get_process_records_async()

    plan = _plan(process_id, config, platform, records)
    outcomes = await dispatch_concurrent(plan, terminator)
    return aggregate(outcomes, build_record_map(records))


def cleanup_children(
    config: Optional[Config] = None,
    *,
    platform: Optional[Platform] = None,
) -> List[Outcome]:
    """Kill every descendant of the current process, leaving it running."""
    config = (config or Config()).model_copy(update={"include_target": False})
    return kill_tree_with_config(os.getpid(), config, platform=platform)
