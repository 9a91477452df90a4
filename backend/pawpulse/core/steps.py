import math
from typing import Callable

from pawpulse.core.constants import MIN_STEP_INTERVAL_MS, STEP_THRESHOLD, STEP_WINDOW_SIZE
from pawpulse.core.signal import RisingPeakDetector, SlidingWindowAverager
from pawpulse.core.time_utils import now_ms


class StepEstimator:
    """Counts steps from 3-axis accelerometer samples.

    The acceleration magnitude is smoothed over a short window; a step is a
    rising edge of the "above threshold and climbing" flag, counted only when
    more than `min_step_interval_ms` has passed since the previous step (or
    since the estimator was created/reset).
    """

    def __init__(
        self,
        clock: Callable[[], float] = now_ms,
        threshold: float = STEP_THRESHOLD,
        min_step_interval_ms: float = MIN_STEP_INTERVAL_MS,
        window_size: int = STEP_WINDOW_SIZE,
    ):
        self._clock = clock
        self.threshold = threshold
        self.min_step_interval_ms = min_step_interval_ms
        self._window = SlidingWindowAverager(window_size)
        self._detector = RisingPeakDetector()
        self.reset()

    def reset(self) -> None:
        self.step_count = 0
        self.last_step_time = self._clock()
        self.is_peak = False
        self._window.reset()
        self._detector.reset()

    @property
    def window_length(self) -> int:
        return len(self._window)

    @staticmethod
    def magnitude(x: float, y: float, z: float) -> float:
        return math.sqrt(x * x + y * y + z * z)

    def process_accelerometer_data(self, x: float, y: float, z: float) -> int:
        """Feed one (x, y, z) sample and return the cumulative step count."""
        now = self._clock()
        smoothed = self._window.push(self.magnitude(x, y, z))
        current_is_peak = self._detector.is_peak(smoothed, self.threshold)

        if current_is_peak and not self.is_peak:
            if now - self.last_step_time > self.min_step_interval_ms:
                self.step_count += 1
                self.last_step_time = now

        self.is_peak = current_is_peak
        return self.step_count
