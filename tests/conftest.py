from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from app.api.deps import get_record_source
from app.core.errors import DataFileNotFoundError
from app.main import app


GOVERNMENTS = [
    {"id": 1, "governorate_name_ar": "القاهرة", "governorate_name_en": "Cairo"},
    {"id": 2, "governorate_name_ar": "الجيزة", "governorate_name_en": "Giza"},
    {"id": 3, "governorate_name_ar": "الأسكندرية", "governorate_name_en": "Alexandria"},
    {"id": 4, "governorate_name_ar": "الدقهلية", "governorate_name_en": "Dakahlia"},
    {"id": 5, "governorate_name_ar": "البحر الأحمر", "governorate_name_en": "Red Sea"},
    {"id": 6, "governorate_name_ar": "البحيرة", "governorate_name_en": "Beheira"},
    {"id": 7, "governorate_name_ar": "الفيوم", "governorate_name_en": "Fayoum"},
]

CITIES = [
    {"id": 10, "city_name_ar": "الدقي", "city_name_en": "Dokki", "governorate_id": 2},
    {"id": 11, "city_name_ar": "مدينة نصر", "city_name_en": "Nasr City", "governorate_id": 1},
    {"id": 12, "city_name_ar": "مجهولة", "city_name_en": "Nowhere", "governorate_id": 99},
]


class InMemorySource:
    """
    Record source backed by dicts keyed by file name, shaped like the JSON files.
    """

    def __init__(self, files: dict[str, list[dict]]):
        self.files = files
        self.loaded: list[str] = []

    async def load_all(self, model, file_name):
        self.loaded.append(file_name)
        if file_name not in self.files:
            raise DataFileNotFoundError(Path(file_name))
        return [model.model_validate(item) for item in self.files[file_name]]


@pytest.fixture
def source() -> InMemorySource:
    return InMemorySource({
        "governments.json": list(GOVERNMENTS),
        "cities.json": list(CITIES),
    })


@pytest_asyncio.fixture
async def client(source: InMemorySource):
    """
    HTTP client whose endpoints read from the in-memory source.
    """
    app.dependency_overrides[get_record_source] = lambda: source

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
