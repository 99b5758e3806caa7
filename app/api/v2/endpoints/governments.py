from fastapi import APIRouter, Depends

from app.api.deps import get_record_source
from app.core.config import settings
from app.schemas.reference import Government
from app.services.json_store import RecordSource

router = APIRouter()


@router.get("/governments", response_model=list[Government])
async def list_governments(source: RecordSource = Depends(get_record_source)) -> list[Government]:
    return await source.load_all(Government, settings.governments_file)
