from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Union
from app.application.common.locations.schemas import LocationFound, LocationError
from app.application.common.locations.usecases.get_location import get_location_usecase
from app.core.config import Settings, get_settings
from app.core.dependencies import get_supabase
from app.services.supabase_manager import SupabaseManager

router = APIRouter()

# O status HTTP é 200 mesmo em erro; o status real vem no corpo
LOOKUP_RESPONSES = {200: {"model": Union[LocationFound, LocationError]}}


@router.get("/", responses=LOOKUP_RESPONSES)
def get_location_without_id(settings: Settings = Depends(get_settings)):
    lookup = get_location_usecase(None, db=None, settings=settings)
    return JSONResponse(content=lookup.body, status_code=lookup.status_code)


@router.get("/{id}", responses=LOOKUP_RESPONSES)
def get_location(
    id: str,
    db: SupabaseManager = Depends(get_supabase),
    settings: Settings = Depends(get_settings),
):
    lookup = get_location_usecase(id, db=db, settings=settings)
    return JSONResponse(content=lookup.body, status_code=lookup.status_code)
