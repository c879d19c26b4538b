"""Process records and kill outcome models."""

from typing import Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict


class ProcessRecord(BaseModel):
    """One row of a process directory snapshot."""

    model_config = ConfigDict(frozen=True)

    pid: int
    parent_pid: int
    name: str


class Killed(BaseModel):
    """The terminator delivered its signal (or terminate call) to ``pid``."""

    model_config = ConfigDict(frozen=True)

    pid: int
    status: Literal["killed"] = "killed"


class MaybeAlreadyTerminated(BaseModel):
    """The OS reported the process as gone; treated as success."""

    model_config = ConfigDict(frozen=True)

    pid: int
    reason: str
    status: Literal["maybe_already_terminated"] = "maybe_already_terminated"


class KilledProcess(BaseModel):
    """Public result for a killed process, joined with its snapshot record."""

    model_config = ConfigDict(frozen=True)

    pid: int
    parent_pid: int
    name: str
    status: Literal["killed"] = "killed"


# Per-PID result of a single Terminator.kill call
KillOutcome = Union[Killed, MaybeAlreadyTerminated]

# Per-PID result returned to callers of kill_tree
Outcome = Union[KilledProcess, MaybeAlreadyTerminated]

ChildIndex = Dict[int, List[int]]
RecordMap = Dict[int, ProcessRecord]
