"""
Country dataset and globe data loading.

Data sources (see paths.py):
    api-data/countries.json  - pre-processed by scripts/process_csv.py (primary)
    data/countries.csv       - raw dataset (fallback)
    globe-data/XX-globe.json - one file per theme

Country schema:
    country_code, country_description, macroarea_id, continent_id
    [centerLat, centerLng]  - only present in the pre-processed JSON
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pandas as pd

from . import paths
from .constants import MACROAREA_DATA
from .errors import DataUnavailable

logger = logging.getLogger("journeymap")

REQUIRED_FIELDS = ("country_code", "country_description", "macroarea_id", "continent_id")
INTEGER_FIELDS = ("macroarea_id", "continent_id")


@dataclass(frozen=True)
class Country:
    """One row of the country dataset."""
    code: str
    name: str
    macroarea_id: int
    continent_id: int
    center_lat: float = 0.0
    center_lng: float = 0.0

    def to_dict(self) -> dict:
        return {
            "country_code": self.code,
            "country_description": self.name,
            "macroarea_id": self.macroarea_id,
            "continent_id": self.continent_id,
            "centerLat": self.center_lat,
            "centerLng": self.center_lng,
        }


def _region_center(macroarea_id: int) -> Tuple[float, float]:
    info = MACROAREA_DATA.get(macroarea_id)
    if info is None:
        return 0.0, 0.0
    return info.center_lat, info.center_lng


def _to_int(value, field: str) -> int:
    """Coerce a macroarea/continent id; floats like 12.0 are accepted."""
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer, got {value!r}")
        return int(value)
    text = str(value).strip()
    if not text:
        raise ValueError(f"{field} is empty")
    return int(text)


def country_from_record(record: dict) -> Country:
    """
    Build a Country from a raw record (JSON object or CSV row).
    Text fields are trimmed and ids coerced to int. Raises KeyError or
    ValueError when a required field is missing or malformed.
    """
    missing = [f for f in REQUIRED_FIELDS if f not in record]
    if missing:
        raise KeyError(f"Missing fields: {', '.join(missing)}")

    macroarea_id = _to_int(record["macroarea_id"], "macroarea_id")
    continent_id = _to_int(record["continent_id"], "continent_id")

    center_lat, center_lng = _region_center(macroarea_id)
    lat, lng = record.get("centerLat"), record.get("centerLng")
    if lat not in (None, "") and lng not in (None, ""):
        center_lat, center_lng = float(lat), float(lng)

    return Country(
        code=str(record["country_code"]).strip(),
        name=str(record["country_description"]).strip(),
        macroarea_id=macroarea_id,
        continent_id=continent_id,
        center_lat=center_lat,
        center_lng=center_lng,
    )


def load_countries_from_json(path: Path) -> List[Country]:
    """Load the pre-processed country dataset (a JSON array of records)."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of countries in {path}, got {type(data).__name__}")

    return [country_from_record(record) for record in data]


def load_countries_from_csv(path: Path) -> List[Country]:
    """
    Load the raw countries CSV.
    Every column is read as text so codes like "NA" (Namibia) survive,
    then each row goes through the same coercion as the JSON records.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    df.columns = [c.strip() for c in df.columns]

    countries = []
    for row_number, row in enumerate(df.to_dict(orient="records"), start=2):
        if not any(str(v).strip() for v in row.values()):
            continue
        try:
            countries.append(country_from_record(row))
        except (KeyError, ValueError) as e:
            raise ValueError(f"{path.name} line {row_number}: {e}") from e

    return countries


def _candidate_loaders(json_path: Optional[Path], csv_path: Optional[Path]):
    """Ordered (description, loader) pairs tried by load_countries."""
    json_path = json_path or paths.COUNTRIES_JSON_PATH
    csv_path = csv_path or paths.COUNTRIES_CSV_PATH
    return [
        (str(json_path), lambda: load_countries_from_json(json_path)),
        (str(csv_path), lambda: load_countries_from_csv(csv_path)),
    ]


def load_countries(json_path: Optional[Path] = None, csv_path: Optional[Path] = None) -> List[Country]:
    """
    Load the full country dataset.

    Tries the pre-processed JSON first, then the raw CSV. Each failure is
    logged and the next source tried.

    Raises:
        DataUnavailable: when no source could be read or parsed
    """
    attempts: List[Tuple[str, Callable[[], List[Country]]]] = _candidate_loaders(json_path, csv_path)
    errors = []

    for source, loader in attempts:
        try:
            countries = loader()
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Country source unavailable ({source}): {e}")
            errors.append(f"{source}: {e}")
            continue

        logger.info(f"Loaded {len(countries)} countries from {source}")
        return countries

    raise DataUnavailable(
        "Failed to load country data: " + "; ".join(errors),
        sources=[source for source, _ in attempts],
    )


def load_globe_data(theme: str) -> dict:
    """
    Load the globe data file for a canonical theme id.

    Raises:
        DataUnavailable: when the file is missing or not a JSON object
    """
    filepath = paths.get_globe_file(theme)

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataUnavailable(
            f"Failed to load globe data for theme {theme}: {e}",
            sources=[str(filepath)],
        ) from e

    if not isinstance(data, dict):
        raise DataUnavailable(
            f"Failed to load globe data for theme {theme}: expected a JSON object",
            sources=[str(filepath)],
        )

    return data
