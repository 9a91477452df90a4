from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.sql import func
from pawpulse.db import Base


class Dog(Base):
    """Static profile used for calorie estimates. No readings are stored."""

    __tablename__ = "dogs"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)

    # One of the breeds with a known BMR, or "Other"
    breed = Column(String(40), nullable=False, server_default="Other")

    weight_kg = Column(Numeric(5, 2), nullable=False)  # e.g. 24.50

    # "puppy (0-1 year)", "adult (1-7 years)", "senior (7+ years)"
    age_group = Column(String(40), nullable=False)

    sex = Column(String(10), nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
