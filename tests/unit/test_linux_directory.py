"""Tests for /proc parsing, run against a fake /proc tree."""

import logging
import os
from pathlib import Path

import pytest

from kill_tree.core.errors import MalformedDirectoryEntryError, ProcessOSError
from kill_tree.core.models import ProcessRecord
from kill_tree.platforms.linux import ProcDirectory, parse_status, read_process_record


def _status(name: str, ppid: str) -> str:
    return (
        f"Name:\t{name}\n"
        "Umask:\t0022\n"
        "State:\tS (sleeping)\n"
        f"Tgid:\t0\n"
        f"PPid:\t{ppid}\n"
        "TracerPid:\t0\n"
    )


@pytest.fixture
def proc_root(tmp_path):
    """A /proc lookalike with a small tree and some noise."""
    root = tmp_path / "proc"
    root.mkdir()
    for pid, ppid, name in [(1, "0", "init"), (10, "1", "bash"), (11, "10", "sleep")]:
        entry = root / str(pid)
        entry.mkdir()
        (entry / "status").write_text(_status(name, ppid))
    # Non-process entries
    (root / "self").mkdir()
    (root / "meminfo").write_text("MemTotal: 1 kB\n")
    return root


class TestParseStatus:
    def test_parses_name_and_ppid(self):
        record = parse_status(_status("bash", "1"), Path("/proc/10/status"), 10)

        assert record == ProcessRecord(pid=10, parent_pid=1, name="bash")

    def test_name_with_spaces_kept_whole(self):
        record = parse_status(_status("Web Content", "1"), Path("/proc/10/status"), 10)

        assert record.name == "Web Content"

    def test_missing_ppid(self):
        with pytest.raises(MalformedDirectoryEntryError, match="PPid"):
            parse_status("Name:\tbash\n", Path("/proc/10/status"), 10)

    def test_missing_name(self):
        with pytest.raises(MalformedDirectoryEntryError, match="Name"):
            parse_status("PPid:\t1\n", Path("/proc/10/status"), 10)

    def test_invalid_ppid(self):
        with pytest.raises(MalformedDirectoryEntryError) as exc_info:
            parse_status(_status("bash", "abc"), Path("/proc/10/status"), 10)

        assert exc_info.value.process_id == 10


class TestReadProcessRecord:
    def test_non_numeric_entry_ignored(self, proc_root):
        assert read_process_record(proc_root / "self") is None

    def test_vanished_process_ignored(self, proc_root):
        (proc_root / "77").mkdir()

        assert read_process_record(proc_root / "77") is None

    def test_unreadable_status_is_malformed(self, proc_root):
        entry = proc_root / "78"
        entry.mkdir()
        # A directory where the status file should be cannot be read as text
        (entry / "status").mkdir()

        with pytest.raises(MalformedDirectoryEntryError):
            read_process_record(entry)


class TestProcDirectory:
    def test_snapshot(self, proc_root):
        snapshot = ProcDirectory(proc_root).get_process_records()

        assert sorted(snapshot, key=lambda r: r.pid) == [
            ProcessRecord(pid=1, parent_pid=0, name="init"),
            ProcessRecord(pid=10, parent_pid=1, name="bash"),
            ProcessRecord(pid=11, parent_pid=10, name="sleep"),
        ]

    def test_malformed_entry_skipped_with_warning(self, proc_root, caplog):
        bad = proc_root / "12"
        bad.mkdir()
        (bad / "status").write_text("Name:\tbroken\n")

        with caplog.at_level(logging.WARNING, logger="kill_tree.platforms.linux"):
            snapshot = ProcDirectory(proc_root).get_process_records()

        assert 12 not in [r.pid for r in snapshot]
        assert len(snapshot) == 3
        assert "Skipping process entry" in caplog.text

    def test_missing_root_is_hard_error(self, tmp_path):
        with pytest.raises(ProcessOSError):
            ProcDirectory(tmp_path / "nope").get_process_records()

    @pytest.mark.asyncio
    async def test_async_snapshot_matches_sync(self, proc_root):
        directory = ProcDirectory(proc_root)

        sync_snapshot = directory.get_process_records()
        async_snapshot = await directory.get_process_records_async()

        key = lambda r: r.pid  # noqa: E731
        assert sorted(async_snapshot, key=key) == sorted(sync_snapshot, key=key)

    @pytest.mark.skipif(not Path("/proc/self/status").exists(), reason="requires Linux /proc")
    def test_real_proc_contains_current_process(self):
        snapshot = ProcDirectory().get_process_records()

        me = next(r for r in snapshot if r.pid == os.getpid())
        assert me.parent_pid == os.getppid()
