import time


def now_ms() -> float:
    """Monotonic clock in milliseconds, used to time beats and steps."""
    return time.monotonic() * 1000.0
