"""Global test fixtures for journeymap."""

import json
import os
import tempfile

# Keep log files out of the working tree; must run before journeymap is imported
os.environ.setdefault("JOURNEYMAP_LOGS_DIR", tempfile.mkdtemp(prefix="journeymap-logs-"))

import pytest

from journeymap import paths
from journeymap.data_loading import Country

SAMPLE_RECORDS = [
    {"country_code": "ITA", "country_description": "Italy", "macroarea_id": 12, "continent_id": 1},
    {"country_code": "FRA", "country_description": "France", "macroarea_id": 10, "continent_id": 1},
]

SAMPLE_CSV = (
    "country_code,country_description,macroarea_id,continent_id\n"
    "ITA,Italy,12,1\n"
    "FRA,France,10,1\n"
    "SMR,San Marino,12,1\n"
    "JPN,Japan,37,2\n"
)

SAMPLE_GLOBE = {
    "theme": "borderscapes",
    "metadata": {"title": "Borderscapes", "version": "1.0"},
    "points": [
        {"id": "p1", "name": "Gorizia", "lat": 45.94, "lng": 13.63},
        {"id": "p2", "name": "Vaals", "lat": 50.75, "lng": 6.02},
        {"id": "p3", "name": "Iguazu", "lat": -25.59, "lng": -54.59},
    ],
}


@pytest.fixture
def sample_countries():
    """Three countries across two known macroareas plus one unknown (999)."""
    return [
        Country("ITA", "Italy", 12, 1, 42.0, 13.0),
        Country("FRA", "France", 10, 1, 50.0, 5.0),
        Country("SMR", "San Marino", 12, 1, 42.0, 13.0),
        Country("XXX", "Nowhere", 999, 9, 0.0, 0.0),
    ]


@pytest.fixture
def data_root(tmp_path, monkeypatch):
    """Point every data path at an empty temporary folder tree."""
    api_dir = tmp_path / "api-data"
    raw_dir = tmp_path / "data"
    globe_dir = tmp_path / "globe-data"
    for folder in (api_dir, raw_dir, globe_dir):
        folder.mkdir()

    monkeypatch.setattr(paths, "DATA_ROOT", tmp_path)
    monkeypatch.setattr(paths, "API_DATA_DIR", api_dir)
    monkeypatch.setattr(paths, "RAW_DATA_DIR", raw_dir)
    monkeypatch.setattr(paths, "GLOBE_DATA_DIR", globe_dir)
    monkeypatch.setattr(paths, "COUNTRIES_JSON_PATH", api_dir / "countries.json")
    monkeypatch.setattr(paths, "COUNTRIES_CSV_PATH", raw_dir / "countries.csv")
    return tmp_path


def write_countries_json(records):
    paths.COUNTRIES_JSON_PATH.write_text(json.dumps(records), encoding="utf-8")


def write_countries_csv(text):
    paths.COUNTRIES_CSV_PATH.write_text(text, encoding="utf-8")


def write_globe(filename, data):
    (paths.GLOBE_DATA_DIR / filename).write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def populated_data(data_root):
    """Data folder with the sample JSON dataset and the Borderscapes globe."""
    write_countries_json(SAMPLE_RECORDS)
    write_globe("BS-globe.json", SAMPLE_GLOBE)
    return data_root
