"""
journeymap package - Geographic data layer for the Mind the Journey globes.

This package provides:
- Macro-region reference data and themes (constants.py)
- Path and settings configuration (paths.py, settings.py)
- Country and globe data loading (data_loading.py)
- Macro-region aggregation (geography.py)
- Query filters (query_filters.py)
- Response caching (response_cache.py)
- Endpoint handlers (geo_handlers.py)
- Logging and analytics (logging_analytics.py)
"""

# Re-export key functions for convenience
from .constants import (
    MACROAREA_DATA,
    RegionInfo,
    THEME_FILES,
    VALID_LEVELS,
    VALID_THEMES,
)

from .errors import (
    JourneyMapError,
    DataUnavailable,
    InvalidParameter,
    MalformedBounds,
)

from .logging_analytics import (
    log_api_query,
    log_error,
    logger,
)

from .data_loading import (
    Country,
    load_countries,
    load_countries_from_csv,
    load_countries_from_json,
    load_globe_data,
)

from .geography import (
    MacroRegion,
    aggregate_macroareas,
    get_macroarea_name,
    get_region_info,
)

from .query_filters import (
    GeoBounds,
    apply_limit,
    filter_by_bounds,
    filter_by_search,
    parse_bounds,
    parse_bounds_or_none,
)

from .response_cache import (
    CacheKey,
    ResponseCache,
    make_cache_key,
)

from .geo_handlers import (
    build_countries_response,
    build_macroareas_response,
    get_globe_data,
    globe_cache_key,
    list_countries,
    list_macroareas,
    resolve_theme,
    validate_level,
)

__version__ = "2.0.0"
__all__ = [
    # Constants
    "MACROAREA_DATA",
    "RegionInfo",
    "THEME_FILES",
    "VALID_LEVELS",
    "VALID_THEMES",
    # Errors
    "JourneyMapError",
    "DataUnavailable",
    "InvalidParameter",
    "MalformedBounds",
    # Logging
    "log_api_query",
    "log_error",
    "logger",
    # Data loading
    "Country",
    "load_countries",
    "load_countries_from_csv",
    "load_countries_from_json",
    "load_globe_data",
    # Geography
    "MacroRegion",
    "aggregate_macroareas",
    "get_macroarea_name",
    "get_region_info",
    # Filters
    "GeoBounds",
    "apply_limit",
    "filter_by_bounds",
    "filter_by_search",
    "parse_bounds",
    "parse_bounds_or_none",
    # Cache
    "CacheKey",
    "ResponseCache",
    "make_cache_key",
    # Handlers
    "build_countries_response",
    "build_macroareas_response",
    "get_globe_data",
    "globe_cache_key",
    "list_countries",
    "list_macroareas",
    "resolve_theme",
    "validate_level",
]
