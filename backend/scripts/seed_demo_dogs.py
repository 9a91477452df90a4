from pawpulse.db import Base, SessionLocal, engine
from pawpulse.models.dog import Dog


DEMO_DOGS = [
    ("Biscuit", "Poodle", 8.0, "puppy (0-1 year)", "female"),
    ("Rex", "German Shepherd", 34.5, "adult (1-7 years)", "male"),
    ("Honey", "Golden Retriever", 29.0, "senior (7+ years)", "female"),
    ("Moose", "Labrador", 31.2, "adult (1-7 years)", "male"),
    ("Pierre", "French Bulldog", 11.8, "adult (1-7 years)", "male"),
]


def clear_demo_dogs(db) -> None:
    """Delete earlier demo profiles so we can reseed cleanly."""
    names = [d[0] for d in DEMO_DOGS]
    db.query(Dog).filter(Dog.name.in_(names)).delete(synchronize_session=False)
    db.commit()


def seed_demo_dogs(db) -> None:
    """Insert a handful of dog profiles covering every breed table entry."""
    for name, breed, weight_kg, age_group, sex in DEMO_DOGS:
        db.add(Dog(name=name, breed=breed, weight_kg=weight_kg, age_group=age_group, sex=sex))
    db.commit()


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_demo_dogs(db)
        seed_demo_dogs(db)
        print(f"Seeded {len(DEMO_DOGS)} demo dogs.")
    finally:
        db.close()
