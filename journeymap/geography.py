"""
Macro-region lookups and aggregation.
Groups countries into the curated macro-regions of constants.MACROAREA_DATA.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .constants import MACROAREA_DATA, UNKNOWN_CONTINENT, RegionInfo


@dataclass(frozen=True)
class MacroRegion:
    """Aggregate of all countries sharing one macroarea_id."""
    id: int
    name: str
    continent: str
    continent_id: int
    center_lat: float
    center_lng: float
    countries: Tuple[str, ...]
    country_count: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "continent": self.continent,
            "continentId": self.continent_id,
            "centerLat": self.center_lat,
            "centerLng": self.center_lng,
            "countries": list(self.countries),
            "countryCount": self.country_count,
        }


def get_region_info(macroarea_id: int) -> RegionInfo:
    """
    Static metadata for a macro-region.
    Unknown ids get a placeholder instead of failing so aggregation stays
    total over whatever ids the dataset contains.
    """
    info = MACROAREA_DATA.get(macroarea_id)
    if info is not None:
        return info
    return RegionInfo(f"Macroarea {macroarea_id}", UNKNOWN_CONTINENT, 0.0, 0.0)


def get_macroarea_name(macroarea_id: int) -> str:
    return get_region_info(macroarea_id).name


def aggregate_macroareas(countries: Iterable) -> List[MacroRegion]:
    """
    Group countries by macroarea_id.

    Member codes keep the order in which countries were seen; the result is
    sorted by name (case-insensitive), ties broken by id.

    Args:
        countries: Country records (anything with code, macroarea_id, continent_id)

    Returns:
        List of MacroRegion, one per distinct macroarea_id
    """
    members: Dict[int, List[str]] = {}
    continent_ids: Dict[int, int] = {}

    for country in countries:
        macro_id = country.macroarea_id
        if macro_id not in members:
            members[macro_id] = []
            continent_ids[macro_id] = country.continent_id
        members[macro_id].append(country.code)

    macroareas = []
    for macro_id, codes in members.items():
        info = get_region_info(macro_id)
        macroareas.append(MacroRegion(
            id=macro_id,
            name=info.name,
            continent=info.continent,
            continent_id=continent_ids[macro_id],
            center_lat=info.center_lat,
            center_lng=info.center_lng,
            countries=tuple(codes),
            country_count=len(codes),
        ))

    macroareas.sort(key=lambda m: (m.name.casefold(), m.id))
    return macroareas


def summarize_macroareas(macroareas: List[MacroRegion]) -> dict:
    """Metadata block for a macroarea listing."""
    continents = []
    for macro in macroareas:
        if macro.continent_id not in continents:
            continents.append(macro.continent_id)

    return {
        "total_count": len(macroareas),
        "continents_represented": continents,
        "total_countries": sum(m.country_count for m in macroareas),
    }
