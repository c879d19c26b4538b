"""macOS platform: psutil enumeration, signal termination."""

from typing import Optional

from .base import ProcessDirectory
from .psutil_directory import PsutilDirectory
from .unix import UnixPlatform

# PID_MAX in the XNU kernel is 99999; the kernel never hands out PID_MAX itself
MACOS_AVAILABLE_MAX_PROCESS_ID = 99999 - 1


class MacOSPlatform(UnixPlatform):
    name = "macos"
    available_max_process_id = MACOS_AVAILABLE_MAX_PROCESS_ID

    def __init__(self, directory: Optional[ProcessDirectory] = None):
        super().__init__(directory or PsutilDirectory())
