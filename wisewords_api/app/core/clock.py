"""Wall clock used for record timestamps (nanoseconds since the epoch)."""

import time


def now() -> int:
    return time.time_ns()
