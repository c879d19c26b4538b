"""Signal-based termination shared by Linux and macOS."""

import errno
import logging
import os
import signal
from types import MappingProxyType

from ..core.config import Config
from ..core.errors import InvalidCastError, InvalidSignalNameError, ProcessOSError
from ..core.models import Killed, KillOutcome, MaybeAlreadyTerminated
from .base import Platform, Terminator

logger = logging.getLogger(__name__)

KERNEL_PROCESS_ID = 0
INIT_PROCESS_ID = 1

UNIX_RESERVED_PROCESS_IDS = MappingProxyType({
    KERNEL_PROCESS_ID: "Not allowed to kill kernel process",
    INIT_PROCESS_ID: "Not allowed to kill init process",
})

# pid_t is a signed 32-bit integer on every supported Unix
PID_T_MAX = 2**31 - 1


def parse_signal(name: str) -> signal.Signals:
    """Resolve a signal name such as ``SIGKILL`` on the running platform."""
    try:
        return signal.Signals[name.strip().upper()]
    except KeyError:
        raise InvalidSignalNameError(name) from None


class SignalTerminator(Terminator):
    """Sends one signal per PID with ``os.kill``."""

    def __init__(self, sig: signal.Signals):
        self.signal = sig

    def kill(self, pid: int) -> KillOutcome:
        if pid > PID_T_MAX:
            raise InvalidCastError(f"Failed to convert process id {pid} to pid_t")
        try:
            os.kill(pid, self.signal)
        except ProcessLookupError as e:
            # ESRCH: exited between snapshot and signal
            logger.debug(f"Process already terminated: {e}", extra={"pid": pid})
            return MaybeAlreadyTerminated(pid=pid, reason=os.strerror(errno.ESRCH))
        except OSError as e:
            raise ProcessOSError(f"send {self.signal.name}", e, process_id=pid) from e
        return Killed(pid=pid)


class UnixPlatform(Platform):
    """Common validation and termination for Unix-like systems."""

    reserved_process_ids = UNIX_RESERVED_PROCESS_IDS

    def make_terminator(self, config: Config) -> SignalTerminator:
        return SignalTerminator(parse_signal(config.signal))
