from fastapi import APIRouter

from app.api.v1.router import router as v1_router
from app.api.v2.router import router as v2_router
from app.api.v2.endpoints.governments import router as default_governments_router
from app.api.v2.endpoints.cities import router as default_cities_router
from app.core.versioning import API_PREFIX


router = APIRouter(prefix=API_PREFIX)
router.include_router(v1_router)
router.include_router(v2_router)

# No version segment: served by the default version (v2), kept out of the docs
router.include_router(default_governments_router, include_in_schema=False)
router.include_router(default_cities_router, include_in_schema=False)
