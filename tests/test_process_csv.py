"""Tests for the CSV preprocessing script."""

import json

from journeymap.data_loading import load_countries_from_json
from scripts.process_csv import main, process_csv_data

from conftest import SAMPLE_CSV


def test_writes_all_outputs(tmp_path):
    csv_path = tmp_path / "countries.csv"
    csv_path.write_text(SAMPLE_CSV, encoding="utf-8")
    out_dir = tmp_path / "api-data"

    stats = process_csv_data(csv_path, out_dir)

    countries = json.loads((out_dir / "countries.json").read_text(encoding="utf-8"))
    assert countries[0] == {
        "country_code": "ITA",
        "country_description": "Italy",
        "macroarea_id": 12,
        "continent_id": 1,
        "centerLat": 42.0,
        "centerLng": 13.0,
        "macroarea_name": "Italian Peninsula",
        "continent_name": "Europe",
    }

    macroareas = json.loads((out_dir / "macroareas.json").read_text(encoding="utf-8"))
    assert [m["name"] for m in macroareas] == ["East Asia", "Italian Peninsula", "Western Europe"]
    assert macroareas[1]["countries"] == ["ITA", "SMR"]

    written_stats = json.loads((out_dir / "stats.json").read_text(encoding="utf-8"))
    assert written_stats == stats
    assert stats["totalCountries"] == 4
    assert stats["totalMacroareas"] == 3
    assert stats["continents"] == ["Asia", "Europe"]
    assert stats["sampleCountries"][0] == {"code": "ITA", "name": "Italy", "macroarea": "Italian Peninsula"}


def test_output_is_readable_by_the_api_loader(tmp_path):
    csv_path = tmp_path / "countries.csv"
    csv_path.write_text(SAMPLE_CSV, encoding="utf-8")

    process_csv_data(csv_path, tmp_path / "out")

    countries = load_countries_from_json(tmp_path / "out" / "countries.json")
    assert [c.code for c in countries] == ["ITA", "FRA", "SMR", "JPN"]


def test_main_returns_error_status_on_missing_csv(tmp_path):
    assert main(["--csv", str(tmp_path / "absent.csv"), "--out", str(tmp_path / "out")]) == 1


def test_main_success(tmp_path, capsys):
    csv_path = tmp_path / "countries.csv"
    csv_path.write_text(SAMPLE_CSV, encoding="utf-8")

    assert main(["--csv", str(csv_path), "--out", str(tmp_path / "out")]) == 0
    assert "Countries:  4" in capsys.readouterr().out
