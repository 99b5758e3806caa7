from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReferenceRecord(BaseModel):
    """
    Read-only record loaded from a reference data file.

    Field aliases are the JSON keys used in the data files and in API
    responses; attribute names are accepted too so records can be built in code.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Government(ReferenceRecord):
    id: int
    name_ar: str = Field(alias="governorate_name_ar")
    name_en: str = Field(alias="governorate_name_en")


class City(ReferenceRecord):
    id: int
    name_ar: str = Field(alias="city_name_ar")
    name_en: str = Field(alias="city_name_en")
    government_id: int = Field(alias="governorate_id")

    # Filled in by enrichment only; stays None for dangling government ids
    government: Government | None = None
