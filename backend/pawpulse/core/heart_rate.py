"""Heart rate from a pulse-sensor infrared stream.

Each IR sample is smoothed with an EMA and the smoothed trace is scanned for
local maxima above a fixed amplitude threshold. A maximum can only be seen
once the following sample has arrived, so the peak test runs on the three
most recent smoothed values and a beat is timestamped when it is detected.
The lag is one sample on every beat, so inter-beat intervals are exact.

Intervals are converted to instantaneous BPM; values outside the plausible
range are dropped as noise and the rest feed a bounded rolling average.
"""

import math
from collections import deque
from typing import Callable

from pawpulse.core.constants import (
    BPM_HISTORY_SIZE,
    BPM_MAX,
    BPM_MIN,
    EMA_ALPHA,
    HR_PEAK_THRESHOLD,
    MS_PER_MINUTE,
)
from pawpulse.core.signal import SignalSmoother, is_local_peak
from pawpulse.core.time_utils import now_ms


class HeartRateEstimator:
    def __init__(
        self,
        clock: Callable[[], float] = now_ms,
        alpha: float = EMA_ALPHA,
        peak_threshold: float = HR_PEAK_THRESHOLD,
        bpm_min: float = BPM_MIN,
        bpm_max: float = BPM_MAX,
        history_size: int = BPM_HISTORY_SIZE,
    ):
        self._clock = clock
        self.peak_threshold = peak_threshold
        self.bpm_min = bpm_min
        self.bpm_max = bpm_max
        self._smoother = SignalSmoother(alpha)
        self._history: deque[float] = deque(maxlen=history_size)
        self.reset()

    def reset(self) -> None:
        self._smoother.reset()
        self._history.clear()
        self._prev: float | None = None
        self._prev_prev: float | None = None
        self.last_beat_time: float | None = None
        self.bpm = 0.0

    @property
    def rounded_bpm(self) -> int:
        # half-up, not banker's rounding
        return int(math.floor(self.bpm + 0.5))

    @property
    def history(self) -> tuple[float, ...]:
        return tuple(self._history)

    def calculate_bpm(self, ir_value: float) -> int:
        """Feed one IR sample and return the rounded rolling-average BPM."""
        now = self._clock()
        smoothed = self._smoother.smooth(ir_value)

        if self._prev is not None and self._prev_prev is not None:
            if is_local_peak(self._prev, self._prev_prev, smoothed, self.peak_threshold):
                self._on_beat(now)

        self._prev_prev = self._prev
        self._prev = smoothed
        return self.rounded_bpm

    def _on_beat(self, now: float) -> None:
        if self.last_beat_time is not None:
            interval = now - self.last_beat_time
            # clock did not advance; nothing sensible to compute
            if interval > 0:
                instant_bpm = MS_PER_MINUTE / interval
                if self.bpm_min <= instant_bpm <= self.bpm_max:
                    self._history.append(instant_bpm)
                    self.bpm = sum(self._history) / len(self._history)
        # The first beat only establishes the baseline
        self.last_beat_time = now
