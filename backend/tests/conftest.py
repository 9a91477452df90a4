import os

import pytest

# Use in-memory sqlite for tests; must be set before pawpulse is imported
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(clock):
    from fastapi.testclient import TestClient  # noqa: WPS433
    from pawpulse.core.config import settings  # noqa: WPS433
    from pawpulse.core.sessions import SessionRegistry, get_registry  # noqa: WPS433
    from pawpulse.main import app  # noqa: WPS433

    registry = SessionRegistry(settings, clock=clock)
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()
