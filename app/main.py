import logging

from fastapi import FastAPI
from app.api.v1.endpoints import locations
from app.core.config import get_settings

logging.basicConfig(
    level=get_settings().log_level_number,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="API Locations")

app.include_router(locations.router, prefix="/api/locations", tags=["locations"])
