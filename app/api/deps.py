from app.core.config import settings
from app.services.json_store import JsonFileStore, RecordSource


def get_record_source() -> RecordSource:
    # New store per request; nothing is shared between requests
    return JsonFileStore(settings.data_dir)
