from fastapi import APIRouter

from app.api.v1.endpoints.governments import router as governments_router


router = APIRouter(prefix="/v1")
router.include_router(governments_router, tags=["governments"])
