from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pawpulse.api.sensors import router as sensors_router
from pawpulse.api.sessions import router as sessions_router
from pawpulse.api.dogs import router as dogs_router
from pawpulse.db import Base, engine
from pawpulse.models.dog import Dog  # noqa: F401  (import ensures table is registered)
from pawpulse.core.logging_config import setup_logging


setup_logging()

app = FastAPI(title="PawPulse")

# Collars and the companion app post from anywhere
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (dog profiles) on startup
Base.metadata.create_all(bind=engine)

app.include_router(sensors_router)
app.include_router(sessions_router)
app.include_router(dogs_router)


@app.get("/")
def root():
    return {"message": "PawPulse backend is running"}
