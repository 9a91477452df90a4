"""Streaming signal primitives shared by the heart-rate and step estimators.

Everything here works one sample at a time over a small bounded state, so it
can sit directly behind a request handler.
"""

from collections import deque

from pawpulse.core.constants import EMA_ALPHA, STEP_WINDOW_SIZE


class SignalSmoother:
    """Exponential moving average over a scalar stream.

    The first sample seeds the filter unless an explicit `initial` value is
    given; `initial=0.0` gives the classic zero-start filter, whose first few
    outputs are biased toward zero.
    """

    def __init__(self, alpha: float = EMA_ALPHA, initial: float | None = None):
        if not 0.0 < alpha <= 1.0:
            raise ValueError("alpha must be in (0, 1]")
        self.alpha = alpha
        self._initial = initial
        self.value = initial

    def smooth(self, raw: float) -> float:
        if self.value is None:
            self.value = float(raw)
        else:
            self.value = self.value + self.alpha * (raw - self.value)
        return self.value

    def reset(self) -> None:
        self.value = self._initial


class SlidingWindowAverager:
    """Simple moving average over the last `size` values (FIFO)."""

    def __init__(self, size: int = STEP_WINDOW_SIZE):
        if size < 1:
            raise ValueError("window size must be >= 1")
        self.size = size
        self._window: deque[float] = deque(maxlen=size)

    def push(self, value: float) -> float:
        self._window.append(value)
        return sum(self._window) / len(self._window)

    def reset(self) -> None:
        self._window.clear()

    def values(self) -> list[float]:
        return list(self._window)

    def __len__(self) -> int:
        return len(self._window)


def is_local_peak(current: float, previous: float, nxt: float, threshold: float) -> bool:
    """True when `current` is above both neighbours and above `threshold`."""
    return current > previous and current > nxt and current > threshold


class RisingPeakDetector:
    """Flags samples that are above a threshold and still rising.

    The last seen value is updated on every call, so a flat or falling
    signal never reports a peak even when it stays above the threshold.
    """

    def __init__(self):
        self.last = 0.0

    def is_peak(self, current: float, threshold: float) -> bool:
        peak = current > threshold and current > self.last
        self.last = current
        return peak

    def reset(self) -> None:
        self.last = 0.0
