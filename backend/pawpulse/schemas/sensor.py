from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pawpulse.schemas.dog import AgeGroup, DogSpecies, Sex


class SensorData(BaseModel):
    """One collar sample: calorie inputs plus IR and accelerometer readings.

    Profile fields may be left out when `dog_id` points at a stored profile.
    """

    session_id: str = Field(min_length=1, max_length=128)
    dog_id: Optional[int] = None

    dog_breed: Optional[DogSpecies] = None
    weight: Optional[float] = None  # kg
    age: Optional[AgeGroup] = None
    sex: Optional[Sex] = None
    speed: float = 0.0

    ir_value: float
    x: float
    y: float
    z: float

    # Firmware sends extra diagnostic fields we do not use. NaN/Infinity
    # would stick in the session smoother for good.
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class MetricsResponse(BaseModel):
    bpm: int
    calories_burnt: float = Field(alias="caloriesBurnt")
    steps: int

    model_config = ConfigDict(populate_by_name=True)
