"""Tests for platform selection."""

import pytest

from kill_tree.core.errors import UnsupportedPlatformError
from kill_tree.platforms import (
    LinuxPlatform,
    MacOSPlatform,
    Platform,
    ProcDirectory,
    PsutilDirectory,
    WindowsPlatform,
    current_platform,
)


@pytest.mark.parametrize(
    "platform_name, cls, directory_cls",
    [
        ("linux", LinuxPlatform, ProcDirectory),
        ("darwin", MacOSPlatform, PsutilDirectory),
        ("win32", WindowsPlatform, PsutilDirectory),
    ],
)
def test_selects_collaborators_by_os(platform_name, cls, directory_cls):
    platform = current_platform(platform_name)

    assert isinstance(platform, cls)
    assert isinstance(platform.directory, directory_cls)


def test_unsupported_os():
    with pytest.raises(UnsupportedPlatformError, match="sunos5"):
        current_platform("sunos5")


@pytest.mark.parametrize("cls", [Platform, LinuxPlatform, MacOSPlatform, WindowsPlatform])
def test_reserved_process_ids_are_read_only(cls):
    with pytest.raises(TypeError):
        cls.reserved_process_ids[7] = "Not allowed"

    assert 7 not in Platform.reserved_process_ids
