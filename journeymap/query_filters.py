"""
Shared filtering utilities for the country, macroarea and globe endpoints.

Provides composable filters:
- filter_by_search: case-insensitive substring match on text fields
- filter_by_bounds: latitude/longitude box, inclusive edges
- filter_by_macroarea / filter_by_continent: id equality
- apply_limit: truncation, applied last

Usage:
    from journeymap.query_filters import filter_by_search, apply_limit

    countries = filter_by_search(countries, "ita", fields=COUNTRY_SEARCH_FIELDS)
    countries = apply_limit(countries, 50)
"""

import json
import logging
import math
from typing import Callable, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .errors import MalformedBounds

logger = logging.getLogger("journeymap")

BOUNDS_FIELDS = ("north", "south", "east", "west")

# Text accessors used by the search filter
COUNTRY_SEARCH_FIELDS = (lambda c: c.name, lambda c: c.code)
MACROAREA_SEARCH_FIELDS = (lambda m: m.name,)


class GeoBounds(NamedTuple):
    north: float
    south: float
    east: float
    west: float

    def contains(self, lat: float, lng: float) -> bool:
        """Inclusive on every edge; inverted boxes contain nothing."""
        return self.south <= lat <= self.north and self.west <= lng <= self.east

    def to_dict(self) -> dict:
        return self._asdict()


def parse_bounds(raw) -> Optional[GeoBounds]:
    """
    Parse bounds from a JSON string or a dict.

    Returns None for absent input ('' or None). The box is returned exactly
    as given; south > north or west > east is not corrected.

    Raises:
        MalformedBounds: input is not an object with four numeric edges
    """
    if raw is None or raw == "":
        return None

    data = raw
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedBounds(f"Bounds are not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedBounds(f"Bounds must be an object, got {type(data).__name__}")

    edges = []
    for field in BOUNDS_FIELDS:
        value = data.get(field)
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise MalformedBounds(f"Bounds field '{field}' is missing or not numeric")
        try:
            number = float(value)
        except ValueError as e:
            raise MalformedBounds(f"Bounds field '{field}' is not numeric: {value!r}") from e
        if not math.isfinite(number):
            raise MalformedBounds(f"Bounds field '{field}' is not finite: {value!r}")
        edges.append(number)

    return GeoBounds(*edges)


def parse_bounds_or_none(raw) -> Optional[GeoBounds]:
    """parse_bounds, treating malformed input as if no bounds were given."""
    try:
        return parse_bounds(raw)
    except MalformedBounds as e:
        logger.warning(f"Ignoring malformed bounds {raw!r}: {e}")
        return None


def filter_by_search(items: Iterable, term: Optional[str],
                     fields: Sequence[Callable] = COUNTRY_SEARCH_FIELDS) -> List:
    """
    Keep items where any field contains term (case-insensitive).
    An empty or missing term keeps everything.
    """
    items = list(items)
    if not term:
        return items

    needle = term.lower()
    return [
        item for item in items
        if any(needle in (get(item) or "").lower() for get in fields)
    ]


def point_coords(point) -> Optional[Tuple[float, float]]:
    """(lat, lng) of a globe point dict, or None if it has no usable coordinates."""
    if not isinstance(point, dict):
        return None
    lat, lng = point.get("lat"), point.get("lng")
    if isinstance(lat, bool) or isinstance(lng, bool):
        return None
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    return lat, lng


def country_coords(country) -> Tuple[float, float]:
    return country.center_lat, country.center_lng


def filter_by_bounds(items: Iterable, bounds: Optional[GeoBounds],
                     coords: Callable = point_coords) -> List:
    """
    Keep items whose coordinates fall inside bounds.
    bounds=None keeps everything; items without coordinates are dropped
    once a box is applied.
    """
    items = list(items)
    if bounds is None:
        return items

    kept = []
    for item in items:
        position = coords(item)
        if position is not None and bounds.contains(*position):
            kept.append(item)
    return kept


def filter_by_macroarea(countries: Iterable, macroarea_id: Optional[int]) -> List:
    countries = list(countries)
    if macroarea_id is None:
        return countries
    return [c for c in countries if c.macroarea_id == macroarea_id]


def filter_by_continent(macroareas: Iterable, continent_id: Optional[int]) -> List:
    macroareas = list(macroareas)
    if continent_id is None:
        return macroareas
    return [m for m in macroareas if m.continent_id == continent_id]


def apply_limit(items: Iterable, limit: Optional[int]) -> List:
    """Truncate to at most limit items; None or <= 0 means no truncation."""
    items = list(items)
    if limit is None or limit <= 0:
        return items
    return items[:limit]
