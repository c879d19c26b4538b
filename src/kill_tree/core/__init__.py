"""Tree resolution, kill ordering and outcome models."""

from .aggregator import aggregate
from .config import Config, KillTreeSettings, load_config
from .dispatcher import dispatch_concurrent, dispatch_sequential
from .errors import (
    InvalidCastError,
    InvalidProcessIdError,
    InvalidSignalNameError,
    KillTreeError,
    MalformedDirectoryEntryError,
    ProcessOSError,
    TaskJoinError,
    UnsupportedPlatformError,
)
from .models import (
    ChildIndex,
    Killed,
    KilledProcess,
    KillOutcome,
    MaybeAlreadyTerminated,
    Outcome,
    ProcessRecord,
)
from .tree import build_child_index, build_record_map, kill_order, resolve_kill_plan
from .validator import validate_process_id

__all__ = [
    # Models
    "ChildIndex",
    "Killed",
    "KilledProcess",
    "KillOutcome",
    "MaybeAlreadyTerminated",
    "Outcome",
    "ProcessRecord",
    # Configuration
    "Config",
    "KillTreeSettings",
    "load_config",
    # Errors
    "KillTreeError",
    "InvalidCastError",
    "InvalidProcessIdError",
    "InvalidSignalNameError",
    "MalformedDirectoryEntryError",
    "ProcessOSError",
    "TaskJoinError",
    "UnsupportedPlatformError",
    # Engine
    "aggregate",
    "build_child_index",
    "build_record_map",
    "dispatch_concurrent",
    "dispatch_sequential",
    "kill_order",
    "resolve_kill_plan",
    "validate_process_id",
]
