import structlog
from fastapi import APIRouter, Depends, HTTPException

from pawpulse.core.sessions import SensorSession, SessionRegistry, get_registry
from pawpulse.schemas.session import SessionRead

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _require(registry: SessionRegistry, session_id: str) -> SensorSession:
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.get("/", response_model=list[SessionRead])
def list_sessions(registry: SessionRegistry = Depends(get_registry)):
    return [s.snapshot() for s in registry.active()]


@router.get("/{session_id}", response_model=SessionRead)
def get_session(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    return _require(registry, session_id).snapshot()


@router.post("/{session_id}/reset_steps", response_model=SessionRead)
def reset_steps(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    session = _require(registry, session_id)
    session.reset_steps()
    logger.info("session.steps_reset", session_id=session_id)
    return session.snapshot()


@router.delete("/{session_id}")
def close_session(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    """End a sensor session and drop its estimators."""
    if not registry.close(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"message": "Session closed"}
