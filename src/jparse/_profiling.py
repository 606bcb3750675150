"""Opt-in hot path profiling for the production routines.

Enabled by setting ``JPARSE_PROFILE`` in the environment before import.
When disabled every hook is a no-op.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "JPARSE_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one production routine."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a call with its duration and the characters it consumed."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """
        Times the enclosed block and records it under ``func_name``.

        ``cursor`` is any object with a ``pos`` attribute; the distance it
        moves while the block runs is recorded as characters processed.
        """

        def __init__(self, func_name: str, cursor: Any = None) -> None:
            self.func_name = func_name
            self.cursor = cursor
            self.start_pos = cursor.pos if cursor is not None else 0
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            chars = (
                self.cursor.pos - self.start_pos
                if self.cursor is not None
                else 0
            )
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a copy of the current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost when disabled
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, cursor: Any = None) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass
