"""Process directory, terminator and platform interfaces."""

import asyncio
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import List, Mapping

from ..core.config import Config
from ..core.models import KillOutcome, ProcessRecord
from ..core.validator import validate_process_id


class ProcessDirectory(ABC):
    """Source of a flat snapshot of every live process on the machine."""

    @abstractmethod
    def get_process_records(self) -> List[ProcessRecord]:
        """
        Snapshot the process table.

        Entries that cannot be read are skipped; only a failure to list the
        table as a whole raises.

        Returns:
            One record per live process
        """
        pass

    async def get_process_records_async(self) -> List[ProcessRecord]:
        """Snapshot the process table without blocking the event loop."""
        return await asyncio.to_thread(self.get_process_records)


class Terminator(ABC):
    """Kills a single process."""

    @abstractmethod
    def kill(self, pid: int) -> KillOutcome:
        """
        Signal or terminate one process.

        Returns:
            Killed on delivery, MaybeAlreadyTerminated when the OS reports the
            process as already gone

        Raises:
            KillTreeError: For any other failure
        """
        pass


class Platform(ABC):
    """Bundle of the OS-specific collaborators used by kill_tree."""

    name: str = ""
    available_max_process_id: int = 0
    reserved_process_ids: Mapping[int, str] = MappingProxyType({})

    def __init__(self, directory: ProcessDirectory):
        self.directory = directory

    def validate_process_id(self, pid: int) -> None:
        validate_process_id(pid, self.reserved_process_ids, self.available_max_process_id)

    def child_index_filter(self, record: ProcessRecord) -> bool:
        """True for records that must not contribute a parent -> child edge."""
        return False

    @abstractmethod
    def make_terminator(self, config: Config) -> Terminator:
        """Build a terminator for one kill_tree call."""
        pass
