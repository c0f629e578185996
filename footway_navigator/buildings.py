"Looks up buildings by a partial name or abbreviation"

from typing import Iterable, Optional
from .maps import Building


def find_building(buildings: Iterable[Building], query: str) -> Optional[Building]:
    """Returns the first building matching `query`, or None

    A building matches if its abbreviation equals the query, or if its full name
    contains the query. Matching is case sensitive."""
    for building in buildings:
        if query == building.abbrev or query in building.fullname:
            return building
    return None
