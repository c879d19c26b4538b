"""Root PID validation against reserved and out-of-range identifiers."""

from typing import Mapping

from .errors import InvalidProcessIdError


def validate_process_id(
    process_id: int,
    reserved_process_ids: Mapping[int, str],
    available_max_process_id: int,
) -> None:
    """
    Reject a target PID that must never be killed or cannot exist.

    Args:
        process_id: PID requested as the root of the tree
        reserved_process_ids: Platform-reserved PIDs mapped to the refusal reason
        available_max_process_id: Highest PID the platform can hand out

    Raises:
        InvalidProcessIdError: If the PID is reserved, negative or too large
    """
    reason = reserved_process_ids.get(process_id)
    if reason is not None:
        raise InvalidProcessIdError(process_id, reason)

    if process_id < 0:
        raise InvalidProcessIdError(process_id, "Process id must not be negative")

    if process_id > available_max_process_id:
        raise InvalidProcessIdError(
            process_id,
            f"Process id is too large (available max process id: {available_max_process_id})",
        )
