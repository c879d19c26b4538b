"""Exception hierarchy for process tree termination."""

from typing import Optional


class KillTreeError(Exception):
    """Base class for every error raised by kill_tree."""


class InvalidProcessIdError(KillTreeError):
    """Target PID is reserved by the OS or outside the platform's PID range."""

    def __init__(self, process_id: int, reason: str):
        self.process_id = process_id
        self.reason = reason
        super().__init__(f"{reason}. process id: {process_id}")


class InvalidSignalNameError(KillTreeError):
    """Configured signal name is not a signal on this platform."""

    def __init__(self, signal_name: str):
        self.signal_name = signal_name
        super().__init__(f"Invalid signal name: {signal_name!r}")


class InvalidCastError(KillTreeError):
    """A PID could not be represented in the OS's native PID type."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid cast. Reason: {reason}")


class MalformedDirectoryEntryError(KillTreeError):
    """A single process directory entry could not be parsed.

    Enumerators catch this, log it, and skip the entry.
    """

    def __init__(self, path: str, reason: str, process_id: Optional[int] = None):
        self.path = path
        self.reason = reason
        self.process_id = process_id
        super().__init__(
            f"Malformed process entry. process id: {process_id}, path: {path}, reason: {reason}"
        )


class ProcessOSError(KillTreeError):
    """An OS call failed in a way that is not a process-already-gone race."""

    def __init__(self, operation: str, os_error: OSError, process_id: Optional[int] = None):
        self.operation = operation
        self.os_error = os_error
        self.errno = os_error.errno
        self.process_id = process_id
        target = f" process id: {process_id}." if process_id is not None else ""
        super().__init__(f"Failed to {operation}.{target} {os_error}")


class TaskJoinError(KillTreeError):
    """A concurrent kill unit could not be joined."""

    def __init__(self, process_id: int, reason: str):
        self.process_id = process_id
        self.reason = reason
        super().__init__(f"Kill task for process id {process_id} failed to join: {reason}")


class UnsupportedPlatformError(KillTreeError):
    """No process collaborators exist for the running OS."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name
        super().__init__(f"Unsupported platform: {platform_name}")
