"""OS-specific process directories and terminators."""

import sys
from typing import Optional

from ..core.errors import UnsupportedPlatformError
from .base import Platform, ProcessDirectory, Terminator
from .linux import LinuxPlatform, ProcDirectory
from .macos import MacOSPlatform
from .psutil_directory import PsutilDirectory
from .unix import SignalTerminator, UnixPlatform, parse_signal
from .windows import HandleTerminator, WindowsPlatform


def current_platform(platform_name: Optional[str] = None) -> Platform:
    """Build the collaborators for the running OS (or ``platform_name``)."""
    platform_name = platform_name or sys.platform
    if platform_name.startswith("linux"):
        return LinuxPlatform()
    if platform_name == "darwin":
        return MacOSPlatform()
    if platform_name == "win32":
        return WindowsPlatform()
    raise UnsupportedPlatformError(platform_name)


__all__ = [
    "Platform",
    "ProcessDirectory",
    "Terminator",
    "current_platform",
    # Linux
    "LinuxPlatform",
    "ProcDirectory",
    # macOS
    "MacOSPlatform",
    "PsutilDirectory",
    # Unix signals
    "SignalTerminator",
    "UnixPlatform",
    "parse_signal",
    # Windows
    "HandleTerminator",
    "WindowsPlatform",
]
