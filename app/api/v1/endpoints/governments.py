from fastapi import APIRouter, Depends

from app.api.deps import get_record_source
from app.core.config import settings
from app.schemas.reference import Government
from app.services.json_store import RecordSource

router = APIRouter()

# v1 is the legacy variant: a fixed prefix of the list, not a page size
V1_GOVERNMENTS_LIMIT = 5


@router.get("/governments", response_model=list[Government])
async def list_governments(source: RecordSource = Depends(get_record_source)) -> list[Government]:
    governments = await source.load_all(Government, settings.governments_file)
    return governments[:V1_GOVERNMENTS_LIMIT]
