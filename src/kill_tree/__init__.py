"""Kill a process and every process it spawned, children first."""

from .api import (
    cleanup_children,
    get_available_max_process_id,
    kill_tree,
    kill_tree_async,
    kill_tree_with_config,
    kill_tree_with_config_async,
)
from .core.config import Config, KillTreeSettings, load_config
from .core.errors import (
    InvalidCastError,
    InvalidProcessIdError,
    InvalidSignalNameError,
    KillTreeError,
    MalformedDirectoryEntryError,
    ProcessOSError,
    TaskJoinError,
    UnsupportedPlatformError,
)
from .core.models import KilledProcess, MaybeAlreadyTerminated, Outcome, ProcessRecord

__version__ = "0.2.0"

__all__ = [
    "cleanup_children",
    "get_available_max_process_id",
    "kill_tree",
    "kill_tree_async",
    "kill_tree_with_config",
    "kill_tree_with_config_async",
    "Config",
    "KillTreeSettings",
    "load_config",
    "KilledProcess",
    "MaybeAlreadyTerminated",
    "Outcome",
    "ProcessRecord",
    "KillTreeError",
    "InvalidCastError",
    "InvalidProcessIdError",
    "InvalidSignalNameError",
    "MalformedDirectoryEntryError",
    "ProcessOSError",
    "TaskJoinError",
    "UnsupportedPlatformError",
]
