from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DogSpecies(str, Enum):
    labrador = "Labrador"
    german_shepherd = "German Shepherd"
    golden_retriever = "Golden Retriever"
    french_bulldog = "French Bulldog"
    poodle = "Poodle"
    other = "Other"


class AgeGroup(str, Enum):
    puppy = "puppy (0-1 year)"
    adult = "adult (1-7 years)"
    senior = "senior (7+ years)"


class Sex(str, Enum):
    male = "male"
    female = "female"


class DogBase(BaseModel):
    name: str
    breed: DogSpecies = DogSpecies.other
    weight_kg: float
    age_group: AgeGroup
    sex: Sex


class DogCreate(DogBase):
    """Schema for registering a dog profile."""
    pass


class DogRead(DogBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
