from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SessionRead(BaseModel):
    """Current estimator state for one sensor session."""

    session_id: str
    dog_id: Optional[int] = None
    bpm: int
    steps: int
    samples: int
    started_at: datetime
    last_seen_at: datetime

    model_config = ConfigDict(from_attributes=True)
