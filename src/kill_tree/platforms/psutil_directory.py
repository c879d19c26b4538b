"""Process directory backed by psutil's native process-info calls."""

import logging
from typing import List

import psutil

from ..core.errors import MalformedDirectoryEntryError, ProcessOSError
from ..core.models import ProcessRecord
from ..utils.error_handling import log_and_ignore
from .base import ProcessDirectory

logger = logging.getLogger(__name__)

_ATTRS = ["pid", "ppid", "name"]


def record_from_info(info: dict) -> ProcessRecord:
    """
    Convert a ``process_iter`` info dict into a record.

    Raises:
        MalformedDirectoryEntryError: If pid or ppid could not be read
    """
    pid = info.get("pid")
    parent_pid = info.get("ppid")
    if pid is None or parent_pid is None:
        raise MalformedDirectoryEntryError(
            f"pid {pid}", "pid or parent pid unavailable", process_id=pid
        )
    return ProcessRecord(pid=pid, parent_pid=parent_pid, name=info.get("name") or "")


class PsutilDirectory(ProcessDirectory):
    """Lists processes through psutil (proc_pidinfo on macOS, toolhelp on Windows)."""

    def get_process_records(self) -> List[ProcessRecord]:
        try:
            processes = list(psutil.process_iter(_ATTRS, ad_value=None))
        except OSError as e:
            raise ProcessOSError("list processes", e) from e

        records = []
        for process in processes:
            try:
                records.append(record_from_info(process.info))
            except MalformedDirectoryEntryError as e:
                log_and_ignore(e, "Skipping process entry", logger_instance=logger)
        return records
