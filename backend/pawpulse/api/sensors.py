import structlog
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pawpulse.core.calories import calculate_calories_burnt
from pawpulse.core.sessions import SessionRegistry, get_registry
from pawpulse.db import get_db
from pawpulse.models.dog import Dog
from pawpulse.schemas.sensor import MetricsResponse, SensorData

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["sensors"])


def _calorie_inputs(payload: SensorData, db: Session):
    """Resolve (species, weight, age, sex), falling back to the stored profile."""
    species, weight, age, sex = payload.dog_breed, payload.weight, payload.age, payload.sex
    if payload.dog_id is None:
        return species, weight, age, sex

    dog = db.get(Dog, payload.dog_id)
    if not dog:
        raise HTTPException(status_code=404, detail="Dog not found")
    return (
        species or dog.breed,
        weight if weight is not None else float(dog.weight_kg),
        age or dog.age_group,
        sex or dog.sex,
    )


@router.post("/sensor_data", response_model=MetricsResponse)
def ingest_sensor_data(
    payload: SensorData,
    db: Session = Depends(get_db),
    registry: SessionRegistry = Depends(get_registry),
):
    """Apply one collar sample to its session and return the current metrics.

    The session's estimators persist across requests, so BPM and steps
    build up as samples arrive in order.
    """
    logger.debug(
        "sensor_data.received",
        session_id=payload.session_id,
        ir_value=payload.ir_value,
        x=payload.x,
        y=payload.y,
        z=payload.z,
    )
    species, weight, age, sex = _calorie_inputs(payload, db)

    session = registry.get_or_create(payload.session_id, dog_id=payload.dog_id)
    bpm, steps = session.process(payload.ir_value, payload.x, payload.y, payload.z)
    calories = calculate_calories_burnt(species, weight, age, sex, payload.speed)

    return MetricsResponse(bpm=bpm, calories_burnt=calories, steps=steps)
