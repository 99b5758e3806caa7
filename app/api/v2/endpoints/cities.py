import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_record_source
from app.core.config import settings
from app.schemas.reference import City, Government
from app.services.enrichment import enrich_cities
from app.services.json_store import RecordSource


log = logging.getLogger(__name__)
router = APIRouter()


@router.get("/cities", response_model=list[City])
async def list_cities(source: RecordSource = Depends(get_record_source)) -> list[City]:
    """
    All cities, each with its government attached (null when the
    governorate_id does not match any government).
    """
    cities = await source.load_all(City, settings.cities_file)
    governments = await source.load_all(Government, settings.governments_file)

    enriched = enrich_cities(cities, governments)
    if log.isEnabledFor(logging.DEBUG):
        dangling = sum(1 for c in enriched if c.government is None)
        log.debug("cities: %d of %d have no matching government", dangling, len(enriched))
    return enriched
