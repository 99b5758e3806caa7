from fastapi import APIRouter

from app.api.v2.endpoints.governments import router as governments_router
from app.api.v2.endpoints.cities import router as cities_router


router = APIRouter(prefix="/v2")
router.include_router(governments_router, tags=["governments"])
router.include_router(cities_router, tags=["cities"])
