"""Linux process directory backed by /proc."""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from ..core.errors import MalformedDirectoryEntryError, ProcessOSError
from ..core.models import ProcessRecord
from ..utils.error_handling import log_and_ignore
from .base import ProcessDirectory
from .unix import UnixPlatform

logger = logging.getLogger(__name__)

# /proc/sys/kernel/pid_max upper bound (PID_MAX_LIMIT on 64-bit kernels)
LINUX_AVAILABLE_MAX_PROCESS_ID = 0x400000


def parse_status(text: str, path: Path, pid: int) -> ProcessRecord:
    """
    Build a record from the contents of ``/proc/<pid>/status``.

    Raises:
        MalformedDirectoryEntryError: If PPid or Name is missing or invalid
    """
    parent_pid: Optional[int] = None
    name: Optional[str] = None
    for line in text.splitlines():
        if parent_pid is not None and name is not None:
            break
        key, sep, value = line.partition(":")
        if not sep:
            continue
        if key == "PPid":
            try:
                parent_pid = int(value.strip())
            except ValueError:
                raise MalformedDirectoryEntryError(
                    str(path), f"invalid PPid value {value.strip()!r}", process_id=pid
                ) from None
        elif key == "Name":
            name = value.strip()

    if parent_pid is None:
        raise MalformedDirectoryEntryError(str(path), "PPid line is missing", process_id=pid)
    if name is None:
        raise MalformedDirectoryEntryError(str(path), "Name line is missing", process_id=pid)
    return ProcessRecord(pid=pid, parent_pid=parent_pid, name=name)


def read_process_record(entry: Path) -> Optional[ProcessRecord]:
    """
    Read one ``/proc`` entry.

    Returns:
        The record, or None for non-process entries and processes that
        exited while being read

    Raises:
        MalformedDirectoryEntryError: If the entry exists but cannot be parsed
    """
    try:
        pid = int(entry.name)
    except ValueError:
        return None

    status_path = entry / "status"
    try:
        text = status_path.read_text(errors="replace")
    except (FileNotFoundError, ProcessLookupError):
        logger.debug(f"Process exited before its status could be read: {status_path}")
        return None
    except OSError as e:
        raise MalformedDirectoryEntryError(str(status_path), str(e), process_id=pid) from e

    return parse_status(text, status_path, pid)


class ProcDirectory(ProcessDirectory):
    """Scans ``/proc`` for process records."""

    def __init__(self, root: Path = Path("/proc")):
        self.root = Path(root)

    def _list_entries(self) -> List[Path]:
        try:
            return list(self.root.iterdir())
        except OSError as e:
            raise ProcessOSError(f"list {self.root}", e) from e

    def _try_read(self, entry: Path) -> Optional[ProcessRecord]:
        try:
            return read_process_record(entry)
        except MalformedDirectoryEntryError as e:
            log_and_ignore(e, "Skipping process entry", logger_instance=logger)
            return None

    def get_process_records(self) -> List[ProcessRecord]:
        records = []
        for entry in self._list_entries():
            record = self._try_read(entry)
            if record is not None:
                records.append(record)
        return records

    async def get_process_records_async(self) -> List[ProcessRecord]:
        """Read every entry as an independent unit of work."""
        entries = await asyncio.to_thread(self._list_entries)
        results = await asyncio.gather(
            *(asyncio.to_thread(self._try_read, entry) for entry in entries)
        )
        return [record for record in results if record is not None]


class LinuxPlatform(UnixPlatform):
    """Linux: /proc enumeration, signal termination."""

    name = "linux"
    available_max_process_id = LINUX_AVAILABLE_MAX_PROCESS_ID

    def __init__(self, directory: Optional[ProcessDirectory] = None):
        super().__init__(directory or ProcDirectory())
