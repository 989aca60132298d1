"""
Constants and static reference data used across the journeymap application.
"""

from types import MappingProxyType
from typing import NamedTuple


class RegionInfo(NamedTuple):
    """Static metadata for one curated macro-region."""
    name: str
    continent: str
    center_lat: float
    center_lng: float


# Curated macro-regions keyed by macroarea_id
MACROAREA_DATA = MappingProxyType({
    1: RegionInfo("North America", "North America", 45.0, -100.0),
    2: RegionInfo("Central America", "North America", 15.0, -90.0),
    3: RegionInfo("Northern South America", "South America", 5.0, -60.0),
    4: RegionInfo("Caribbean", "North America", 20.0, -75.0),
    5: RegionInfo("Lesser Antilles", "North America", 15.0, -62.0),
    6: RegionInfo("Andean South America", "South America", -15.0, -70.0),
    7: RegionInfo("Brazil & Guianas", "South America", -10.0, -55.0),
    8: RegionInfo("Southern Cone", "South America", -35.0, -65.0),
    9: RegionInfo("South Atlantic Islands", "South America", -30.0, -10.0),
    10: RegionInfo("Western Europe", "Europe", 50.0, 5.0),
    11: RegionInfo("Southern Europe", "Europe", 40.0, 0.0),
    12: RegionInfo("Italian Peninsula", "Europe", 42.0, 13.0),
    13: RegionInfo("Alpine Europe", "Europe", 46.5, 8.0),
    14: RegionInfo("Central Europe", "Europe", 50.0, 15.0),
    15: RegionInfo("British Isles", "Europe", 54.0, -4.0),
    16: RegionInfo("Northern Europe", "Europe", 62.0, 15.0),
    17: RegionInfo("Baltic States", "Europe", 57.0, 25.0),
    18: RegionInfo("Eastern Europe", "Europe", 52.0, 35.0),
    19: RegionInfo("Balkans", "Europe", 43.0, 20.0),
    20: RegionInfo("North Atlantic Islands", "Europe", 65.0, -18.0),
    21: RegionInfo("North Africa", "Africa", 25.0, 0.0),
    22: RegionInfo("Sahel", "Africa", 15.0, 0.0),
    23: RegionInfo("West Africa", "Africa", 10.0, -10.0),
    24: RegionInfo("Horn of Africa", "Africa", 10.0, 45.0),
    25: RegionInfo("East Africa", "Africa", -5.0, 35.0),
    26: RegionInfo("Central Africa", "Africa", 0.0, 20.0),
    27: RegionInfo("Southern Africa", "Africa", -25.0, 25.0),
    28: RegionInfo("Western Indian Ocean", "Africa", -15.0, 55.0),
    29: RegionInfo("Arabian Peninsula", "Asia", 22.0, 45.0),
    30: RegionInfo("Levant", "Asia", 33.0, 36.0),
    31: RegionInfo("Anatolia & Caucasus", "Asia", 40.0, 40.0),
    32: RegionInfo("South Caucasus", "Asia", 42.0, 45.0),
    33: RegionInfo("Central Asia", "Asia", 45.0, 65.0),
    34: RegionInfo("South Asia", "Asia", 20.0, 80.0),
    35: RegionInfo("Southeast Asia", "Asia", 10.0, 110.0),
    36: RegionInfo("Maritime Southeast Asia", "Asia", 0.0, 120.0),
    37: RegionInfo("East Asia", "Asia", 35.0, 110.0),
    38: RegionInfo("Tibetan Plateau", "Asia", 32.0, 85.0),
    39: RegionInfo("Australia & New Zealand", "Oceania", -25.0, 135.0),
    40: RegionInfo("Melanesia", "Oceania", -8.0, 155.0),
    41: RegionInfo("Micronesia", "Oceania", 7.0, 150.0),
    42: RegionInfo("Polynesia", "Oceania", -15.0, -150.0),
    43: RegionInfo("Antarctica & Subantarctic", "Antarctica", -80.0, 0.0),
})

UNKNOWN_CONTINENT = "Unknown"

# Globe themes -> globe data file
THEME_FILES = MappingProxyType({
    "borderscapes": "BS-globe.json",
    "wildrealms": "WR-globe.json",
    "livingtraditions": "LT-globe.json",
    "mindscapes": "MS-globe.json",
})

# Short theme names used in copy and links
THEME_ALIASES = MappingProxyType({
    "borders": "borderscapes",
    "nature": "wildrealms",
    "culture": "livingtraditions",
    "geology": "mindscapes",
})

VALID_THEMES = tuple(THEME_FILES.keys())

LEVEL_COUNTRIES = "countries"
LEVEL_MACROAREAS = "macroareas"
VALID_LEVELS = (LEVEL_COUNTRIES, LEVEL_MACROAREAS)

# Freshness window for cached responses (seconds)
CACHE_DURATION_SECONDS = 5 * 60

DEFAULT_LIMIT = 50

API_VERSION = "2.0.0"
