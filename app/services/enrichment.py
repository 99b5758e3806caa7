from __future__ import annotations

from typing import Iterable, Sequence

from app.schemas.reference import City, Government


def index_governments(governments: Iterable[Government]) -> dict[int, Government]:
    # First occurrence wins on duplicate ids
    index: dict[int, Government] = {}
    for g in governments:
        index.setdefault(g.id, g)
    return index


def enrich_cities(cities: Sequence[City], governments: Iterable[Government]) -> list[City]:
    """
    Attach each city's government by id lookup.

    Returns new City objects in input order; a city whose government_id has
    no match gets government=None. Inputs are left untouched.
    """
    by_id = index_governments(governments)
    return [c.model_copy(update={"government": by_id.get(c.government_id)}) for c in cities]
