"""Index validation helpers shared across buffer services.

Editing never fails on a bad row or column: columns clamp into the row and
bad rows turn the call into a no-op. Every ignored call is recorded at debug
level so misbehaving callers still show up in the log.
"""

from __future__ import annotations

from bloc.runtime import telemetry


def row_in_range(index: int, row_count: int, *, allow_end: bool = False) -> bool:
    upper = row_count if allow_end else row_count - 1
    return 0 <= index <= upper


def clamp_column(col: int, size: int) -> int:
    if col < 0 or col > size:
        return size
    return col


def report_ignored(operation: str, **data: object) -> None:
    telemetry.record_event(
        "buffer.index_ignored",
        level="debug",
        data={"operation": operation, **data},
    )


__all__ = ["row_in_range", "clamp_column", "report_ignored"]
