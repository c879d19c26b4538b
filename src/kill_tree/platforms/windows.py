"""Windows platform: psutil enumeration, TerminateProcess termination."""

import ctypes
import logging
from types import MappingProxyType
from typing import Any, Callable, Optional

from ..core.config import Config
from ..core.errors import ProcessOSError
from ..core.models import Killed, KillOutcome, MaybeAlreadyTerminated, ProcessRecord
from .base import Platform, ProcessDirectory, Terminator
from .psutil_directory import PsutilDirectory

logger = logging.getLogger(__name__)

SYSTEM_IDLE_PROCESS_ID = 0
SYSTEM_PROCESS_ID = 4

# PIDs are DWORDs (in practice always multiples of 4)
WINDOWS_AVAILABLE_MAX_PROCESS_ID = 0xFFFFFFFF

PROCESS_TERMINATE = 0x0001
ERROR_ACCESS_DENIED = 5
ERROR_INVALID_PARAMETER = 87
TERMINATED_EXIT_CODE = 1


def _load_kernel32() -> Any:
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    kernel32.OpenProcess.argtypes = [wintypes.DWORD, wintypes.BOOL, wintypes.DWORD]
    kernel32.OpenProcess.restype = wintypes.HANDLE
    kernel32.TerminateProcess.argtypes = [wintypes.HANDLE, wintypes.UINT]
    kernel32.TerminateProcess.restype = wintypes.BOOL
    kernel32.CloseHandle.argtypes = [wintypes.HANDLE]
    kernel32.CloseHandle.restype = wintypes.BOOL
    return kernel32


def _get_last_error() -> int:
    return ctypes.get_last_error()


def _win_error(code: int) -> OSError:
    # ctypes.WinError only exists on Windows builds
    win_error = getattr(ctypes, "WinError", None)
    if win_error is not None:
        return win_error(code)
    return OSError(code, f"Windows error {code}")


class HandleTerminator(Terminator):
    """Opens a PROCESS_TERMINATE handle and calls TerminateProcess."""

    def __init__(
        self,
        kernel32: Optional[Any] = None,
        get_last_error: Optional[Callable[[], int]] = None,
    ):
        self.kernel32 = kernel32 if kernel32 is not None else _load_kernel32()
        self.get_last_error = get_last_error or _get_last_error

    def kill(self, pid: int) -> KillOutcome:
        handle = self.kernel32.OpenProcess(PROCESS_TERMINATE, False, pid)
        if not handle:
            code = self.get_last_error()
            error = _win_error(code)
            if code == ERROR_INVALID_PARAMETER:
                # The parameter is incorrect: no process with this id anymore
                logger.debug(f"Process already terminated: {error}", extra={"pid": pid})
                return MaybeAlreadyTerminated(pid=pid, reason=str(error))
            raise ProcessOSError("open process", error, process_id=pid)

        try:
            outcome = self._terminate(handle, pid)
        except BaseException:
            # The terminate failure wins over a close failure
            if not self.kernel32.CloseHandle(handle):
                logger.warning(
                    f"Failed to close process handle: {_win_error(self.get_last_error())}",
                    extra={"pid": pid},
                )
            raise

        if not self.kernel32.CloseHandle(handle):
            raise ProcessOSError(
                "close process handle", _win_error(self.get_last_error()), process_id=pid
            )
        return outcome

    def _terminate(self, handle: Any, pid: int) -> KillOutcome:
        if self.kernel32.TerminateProcess(handle, TERMINATED_EXIT_CODE):
            return Killed(pid=pid)
        code = self.get_last_error()
        error = _win_error(code)
        if code == ERROR_ACCESS_DENIED:
            # Access is denied: the process is already exiting
            logger.debug(f"Process already terminated: {error}", extra={"pid": pid})
            return MaybeAlreadyTerminated(pid=pid, reason=str(error))
        raise ProcessOSError("terminate process", error, process_id=pid)


class WindowsPlatform(Platform):
    name = "windows"
    available_max_process_id = WINDOWS_AVAILABLE_MAX_PROCESS_ID
    reserved_process_ids = MappingProxyType({
        SYSTEM_IDLE_PROCESS_ID: "Not allowed to kill System Idle Process",
        SYSTEM_PROCESS_ID: "Not allowed to kill System",
    })

    def __init__(self, directory: Optional[ProcessDirectory] = None):
        super().__init__(directory or PsutilDirectory())

    def child_index_filter(self, record: ProcessRecord) -> bool:
        # System Idle Process reports itself as its own parent
        return record.pid == record.parent_pid

    def make_terminator(self, config: Config) -> HandleTerminator:
        # Windows has no signals; config.signal is ignored
        return HandleTerminator()
