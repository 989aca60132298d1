"""
Geo endpoint handlers.

Pure entry points over the country dataset plus the response shaping used by
the HTTP routes in app.py. Routes only parse query strings and serialize;
everything else happens here.

Entry points:
    list_macroareas(search)                      -> [MacroRegion]
    list_countries(search, macroarea_id, limit)  -> [Country]

Response builders:
    build_countries_response   - /api/countries (level=countries|macroareas)
    build_macroareas_response  - /api/macroareas
    get_globe_data             - /api/globe/{theme}
"""

import logging
from datetime import datetime
from typing import List, Optional

from .constants import (
    LEVEL_COUNTRIES,
    LEVEL_MACROAREAS,
    THEME_ALIASES,
    THEME_FILES,
    VALID_LEVELS,
    VALID_THEMES,
)
from .data_loading import Country, load_countries, load_globe_data
from .errors import DataUnavailable, InvalidParameter
from .geography import MacroRegion, aggregate_macroareas, get_macroarea_name, summarize_macroareas
from .query_filters import (
    COUNTRY_SEARCH_FIELDS,
    MACROAREA_SEARCH_FIELDS,
    GeoBounds,
    apply_limit,
    country_coords,
    filter_by_bounds,
    filter_by_continent,
    filter_by_macroarea,
    filter_by_search,
    parse_bounds_or_none,
    point_coords,
)
from .response_cache import ALL_BOUNDS, CacheKey, ResponseCache, make_cache_key

logger = logging.getLogger("journeymap")


# === Parameter validation ===

def validate_level(level: Optional[str]) -> str:
    """Return level if it is a recognized detail level, else raise InvalidParameter."""
    if level not in VALID_LEVELS:
        raise InvalidParameter("level", level, VALID_LEVELS)
    return level


def resolve_theme(theme: Optional[str]) -> str:
    """
    Map a theme name to its canonical id.
    Accepts canonical ids (borderscapes, ...) and short names (borders, ...).
    """
    name = (theme or "").strip().lower()
    name = THEME_ALIASES.get(name, name)
    if name not in THEME_FILES:
        raise InvalidParameter("theme", theme, VALID_THEMES)
    return name


# === Core entry points ===

def list_macroareas(search: Optional[str] = None,
                    countries: Optional[List[Country]] = None,
                    continent_id: Optional[int] = None) -> List[MacroRegion]:
    """
    Macro-region aggregates, optionally narrowed by a name search and a
    continent id. Sorted by name.

    Args:
        search: Case-insensitive substring of the macroarea name
        countries: Country dataset; loaded from disk when omitted
        continent_id: Keep only macroareas on this continent
    """
    if countries is None:
        countries = load_countries()

    macroareas = aggregate_macroareas(countries)
    macroareas = filter_by_search(macroareas, search, fields=MACROAREA_SEARCH_FIELDS)
    return filter_by_continent(macroareas, continent_id)


def list_countries(search: Optional[str] = None,
                   macroarea_id: Optional[int] = None,
                   limit: Optional[int] = None,
                   countries: Optional[List[Country]] = None,
                   bounds: Optional[GeoBounds] = None) -> List[Country]:
    """
    Countries in dataset order, filtered then truncated.

    Args:
        search: Case-insensitive substring of the country name or code
        macroarea_id: Keep only countries of this macroarea
        limit: Maximum number of results (None or <= 0: no limit)
        countries: Country dataset; loaded from disk when omitted
        bounds: Keep only countries whose center lies inside the box
    """
    if countries is None:
        countries = load_countries()

    result = filter_by_macroarea(countries, macroarea_id)
    result = filter_by_search(result, search, fields=COUNTRY_SEARCH_FIELDS)
    result = filter_by_bounds(result, bounds, coords=country_coords)
    return apply_limit(result, limit)


def get_cached_countries(cache: ResponseCache) -> List[Country]:
    """Country dataset, loaded at most once per freshness window."""
    return cache.get_or_compute(make_cache_key(None, LEVEL_COUNTRIES), load_countries)


def _countries_or_empty(cache: ResponseCache) -> List[Country]:
    try:
        return get_cached_countries(cache)
    except DataUnavailable as e:
        logger.warning(f"Country data not available: {e}")
        return []


# === Response builders ===

def country_to_response(country: Country) -> dict:
    return {**country.to_dict(), "macroarea_name": get_macroarea_name(country.macroarea_id)}


def build_countries_response(level: str, cache: ResponseCache,
                             search: Optional[str] = None,
                             macroarea: Optional[int] = None,
                             limit: Optional[int] = None,
                             bounds_raw: Optional[str] = None) -> dict:
    """
    Payload for /api/countries.

    Raises:
        InvalidParameter: unknown level
        DataUnavailable: country dataset cannot be loaded
    """
    validate_level(level)
    countries = get_cached_countries(cache)

    if level == LEVEL_MACROAREAS:
        macroareas = list_macroareas(search, countries=countries)
        return {
            "level": LEVEL_MACROAREAS,
            "total": len(macroareas),
            "data": [m.to_dict() for m in macroareas],
            "searchTerm": search or None,
        }

    bounds = parse_bounds_or_none(bounds_raw)
    selected = list_countries(search, macroarea, limit, countries=countries, bounds=bounds)
    return {
        "level": LEVEL_COUNTRIES,
        "total": len(selected),
        "data": [country_to_response(c) for c in selected],
        "filters": {
            "search": search or None,
            "macroarea": macroarea,
            "bounds": bounds.to_dict() if bounds else None,
        },
    }


def build_macroareas_response(cache: ResponseCache, continent_id: Optional[int] = None) -> dict:
    """Payload for /api/macroareas: aggregates plus a metadata summary."""
    macroareas = list_macroareas(countries=get_cached_countries(cache), continent_id=continent_id)
    return {
        "macroareas": [m.to_dict() for m in macroareas],
        "metadata": {
            **summarize_macroareas(macroareas),
            "last_updated": datetime.now().isoformat(),
        },
    }


def globe_cache_key(theme: str, level: str = LEVEL_MACROAREAS,
                    bounds_raw: Optional[str] = None) -> CacheKey:
    """
    Validated cache key for a globe request.

    Raises:
        InvalidParameter: unknown theme or level
    """
    canonical = resolve_theme(theme)
    validate_level(level)
    return make_cache_key(canonical, level, parse_bounds_or_none(bounds_raw))


def get_globe_data(theme: str, cache: ResponseCache,
                   level: str = LEVEL_MACROAREAS,
                   bounds_raw: Optional[str] = None,
                   key: Optional[CacheKey] = None) -> dict:
    """
    Payload for /api/globe/{theme}.

    The theme's globe file is loaded, its points narrowed to bounds, and the
    country list (level=countries) or macroarea aggregates (level=macroareas)
    attached. Results are cached per (theme, level, bounds).
    A key already built by globe_cache_key can be passed to skip re-parsing.

    Raises:
        InvalidParameter: unknown theme or level
        DataUnavailable: the theme's globe file cannot be loaded
    """
    if key is None:
        key = globe_cache_key(theme, level, bounds_raw)
    canonical = key.theme
    level = key.level
    bounds = None if key.bounds == ALL_BOUNDS else GeoBounds(*key.bounds)

    def compute():
        globe = load_globe_data(canonical)
        countries = _countries_or_empty(cache)

        if level == LEVEL_COUNTRIES:
            globe["countries"] = [c.to_dict() for c in countries]
        else:
            globe["macroareas"] = [m.to_dict() for m in aggregate_macroareas(countries)]

        if bounds is not None:
            globe["points"] = filter_by_bounds(globe.get("points") or [], bounds, coords=point_coords)

        metadata = globe.get("metadata") if isinstance(globe.get("metadata"), dict) else {}
        return {
            **globe,
            "metadata": {
                **metadata,
                "level": level,
                "requestTime": datetime.now().isoformat(),
                "cacheKey": str(key),
            },
        }

    return cache.get_or_compute(key, compute)
