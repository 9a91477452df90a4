from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pawpulse.db import get_db
from pawpulse.models.dog import Dog
from pawpulse.schemas.dog import DogCreate, DogRead


router = APIRouter(prefix="/dogs", tags=["dogs"])


@router.post("/", response_model=DogRead)
def create_dog(payload: DogCreate, db: Session = Depends(get_db)):
    if payload.weight_kg <= 0:
        raise HTTPException(status_code=422, detail="weight_kg must be > 0")

    dog = Dog(
        name=payload.name,
        breed=payload.breed.value,
        weight_kg=payload.weight_kg,
        age_group=payload.age_group.value,
        sex=payload.sex.value,
    )
    db.add(dog)
    db.commit()
    db.refresh(dog)
    return dog


@router.get("/", response_model=list[DogRead])
def list_dogs(db: Session = Depends(get_db)):
    return db.query(Dog).order_by(Dog.id).all()


@router.get("/{dog_id}", response_model=DogRead)
def get_dog(dog_id: int, db: Session = Depends(get_db)):
    dog = db.get(Dog, dog_id)
    if not dog:
        raise HTTPException(status_code=404, detail="Dog not found")
    return dog


@router.delete("/{dog_id}")
def delete_dog(dog_id: int, db: Session = Depends(get_db)):
    dog = db.get(Dog, dog_id)
    if not dog:
        raise HTTPException(status_code=404, detail="Dog not found")
    db.delete(dog)
    db.commit()
    return {"message": "Dog deleted"}
