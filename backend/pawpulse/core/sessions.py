"""Per-session estimator state.

Beat and step detection only work when one estimator sees every sample of a
sensor stream in order. The registry keeps one `SensorSession` per session id
for the lifetime of that stream and each session serialises its samples
behind its own lock (request handlers run on a threadpool).
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

import structlog

from pawpulse.core.config import Settings, settings
from pawpulse.core.heart_rate import HeartRateEstimator
from pawpulse.core.steps import StepEstimator
from pawpulse.core.time_utils import now_ms

logger = structlog.get_logger(__name__)


@dataclass
class SessionSnapshot:
    session_id: str
    dog_id: int | None
    bpm: int
    steps: int
    samples: int
    started_at: datetime
    last_seen_at: datetime


class SensorSession:
    def __init__(
        self,
        session_id: str,
        heart_rate: HeartRateEstimator,
        steps: StepEstimator,
        dog_id: int | None = None,
        clock: Callable[[], float] = now_ms,
    ):
        self.session_id = session_id
        self.dog_id = dog_id
        self.heart_rate = heart_rate
        self.steps = steps
        self.samples = 0
        self._clock = clock
        self._lock = threading.Lock()
        self.started_at = datetime.now(timezone.utc)
        self.last_seen_at = self.started_at
        self.last_seen_ms = clock()

    def process(self, ir_value: float, x: float, y: float, z: float) -> tuple[int, int]:
        """Apply one sample to both estimators; returns (bpm, steps)."""
        with self._lock:
            bpm = self.heart_rate.calculate_bpm(ir_value)
            step_count = self.steps.process_accelerometer_data(x, y, z)
            self.samples += 1
            self._touch()
            return bpm, step_count

    def reset_steps(self) -> None:
        with self._lock:
            self.steps.reset()
            self._touch()

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                session_id=self.session_id,
                dog_id=self.dog_id,
                bpm=self.heart_rate.rounded_bpm,
                steps=self.steps.step_count,
                samples=self.samples,
                started_at=self.started_at,
                last_seen_at=self.last_seen_at,
            )

    def _touch(self) -> None:
        self.last_seen_ms = self._clock()
        self.last_seen_at = datetime.now(timezone.utc)


@dataclass
class SessionRegistry:
    """Maps session ids to live `SensorSession`s."""

    settings: Settings
    clock: Callable[[], float] = now_ms
    _sessions: dict[str, SensorSession] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def _new_session(self, session_id: str, dog_id: int | None) -> SensorSession:
        s = self.settings
        return SensorSession(
            session_id,
            heart_rate=HeartRateEstimator(
                clock=self.clock,
                alpha=s.ema_alpha,
                peak_threshold=s.hr_peak_threshold,
                bpm_min=s.bpm_min,
                bpm_max=s.bpm_max,
                history_size=s.bpm_history_size,
            ),
            steps=StepEstimator(
                clock=self.clock,
                threshold=s.step_threshold,
                min_step_interval_ms=s.min_step_interval_ms,
                window_size=s.step_window_size,
            ),
            dog_id=dog_id,
            clock=self.clock,
        )

    def get_or_create(self, session_id: str, dog_id: int | None = None) -> SensorSession:
        with self._lock:
            self._expire_idle_locked()
            session = self._sessions.get(session_id)
            if session is None:
                session = self._new_session(session_id, dog_id)
                self._sessions[session_id] = session
                logger.info("session.created", session_id=session_id, dog_id=dog_id)
            elif dog_id is not None and session.dog_id is None:
                session.dog_id = dog_id
            return session

    def get(self, session_id: str) -> SensorSession | None:
        with self._lock:
            self._expire_idle_locked()
            return self._sessions.get(session_id)

    def active(self) -> list[SensorSession]:
        with self._lock:
            self._expire_idle_locked()
            return list(self._sessions.values())

    def close(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(
            "session.closed",
            session_id=session_id,
            samples=session.samples,
            steps=session.steps.step_count,
        )
        return True

    def expire_idle(self) -> int:
        with self._lock:
            return self._expire_idle_locked()

    def _expire_idle_locked(self) -> int:
        timeout_s = self.settings.session_idle_timeout_s
        if not timeout_s:
            return 0
        cutoff = self.clock() - timeout_s * 1000.0
        stale = [sid for sid, s in self._sessions.items() if s.last_seen_ms < cutoff]
        for sid in stale:
            del self._sessions[sid]
            logger.info("session.expired", session_id=sid)
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


# One registry per process; sessions live as long as the worker does
registry = SessionRegistry(settings)


# Dependency we will use in FastAPI routes
def get_registry() -> SessionRegistry:
    return registry
