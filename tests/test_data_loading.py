"""Tests for country and globe data loading."""

import pytest

from journeymap import paths
from journeymap.data_loading import (
    Country,
    country_from_record,
    load_countries,
    load_countries_from_csv,
    load_globe_data,
)
from journeymap.errors import DataUnavailable

from conftest import SAMPLE_CSV, SAMPLE_GLOBE, SAMPLE_RECORDS, write_countries_csv, write_countries_json, write_globe


class TestCountryFromRecord:
    """Tests for record coercion."""

    def test_trims_text_and_coerces_ids(self):
        country = country_from_record({
            "country_code": " ITA ",
            "country_description": "  Italy ",
            "macroarea_id": " 12 ",
            "continent_id": "1",
        })

        assert country == Country("ITA", "Italy", 12, 1, 42.0, 13.0)

    def test_center_defaults_to_region_center(self):
        country = country_from_record(SAMPLE_RECORDS[1])

        assert (country.center_lat, country.center_lng) == (50.0, 5.0)

    def test_explicit_center_wins(self):
        record = {**SAMPLE_RECORDS[0], "centerLat": 41.9, "centerLng": 12.5}

        country = country_from_record(record)

        assert (country.center_lat, country.center_lng) == (41.9, 12.5)

    def test_unknown_region_center_is_origin(self):
        record = {**SAMPLE_RECORDS[0], "macroarea_id": 999}

        country = country_from_record(record)

        assert (country.center_lat, country.center_lng) == (0.0, 0.0)

    def test_missing_region_id_fails(self):
        record = {k: v for k, v in SAMPLE_RECORDS[0].items() if k != "macroarea_id"}

        with pytest.raises(KeyError):
            country_from_record(record)

    def test_non_integer_region_id_fails(self):
        with pytest.raises(ValueError):
            country_from_record({**SAMPLE_RECORDS[0], "macroarea_id": "twelve"})

    def test_to_dict_uses_dataset_field_names(self):
        data = country_from_record(SAMPLE_RECORDS[0]).to_dict()

        assert data == {
            "country_code": "ITA",
            "country_description": "Italy",
            "macroarea_id": 12,
            "continent_id": 1,
            "centerLat": 42.0,
            "centerLng": 13.0,
        }


class TestLoadCountries:
    """Tests for the JSON-then-CSV loader chain."""

    def test_loads_primary_json(self, data_root):
        write_countries_json(SAMPLE_RECORDS)

        countries = load_countries()

        assert [c.code for c in countries] == ["ITA", "FRA"]

    def test_falls_back_to_csv_when_json_missing(self, data_root):
        write_countries_csv(SAMPLE_CSV)

        countries = load_countries()

        assert [c.code for c in countries] == ["ITA", "FRA", "SMR", "JPN"]
        assert countries[3].macroarea_id == 37

    def test_falls_back_to_csv_when_json_corrupt(self, data_root):
        paths.COUNTRIES_JSON_PATH.write_text("{not json", encoding="utf-8")
        write_countries_csv(SAMPLE_CSV)

        countries = load_countries()

        assert len(countries) == 4

    def test_json_must_be_a_list(self, data_root):
        write_countries_json({"countries": SAMPLE_RECORDS})
        write_countries_csv(SAMPLE_CSV)

        countries = load_countries()

        assert len(countries) == 4

    def test_raises_data_unavailable_when_no_source(self, data_root):
        with pytest.raises(DataUnavailable) as exc_info:
            load_countries()

        assert str(paths.COUNTRIES_JSON_PATH) in exc_info.value.sources
        assert str(paths.COUNTRIES_CSV_PATH) in exc_info.value.sources

    def test_explicit_paths_override_defaults(self, tmp_path):
        csv_path = tmp_path / "custom.csv"
        csv_path.write_text(SAMPLE_CSV, encoding="utf-8")

        countries = load_countries(json_path=tmp_path / "absent.json", csv_path=csv_path)

        assert len(countries) == 4

    def test_loading_never_modifies_files(self, data_root):
        write_countries_json(SAMPLE_RECORDS)
        before = paths.COUNTRIES_JSON_PATH.read_text(encoding="utf-8")

        load_countries()

        assert paths.COUNTRIES_JSON_PATH.read_text(encoding="utf-8") == before


class TestLoadCountriesFromCsv:
    """Tests for the CSV parser."""

    def test_trims_whitespace_and_skips_blank_lines(self, tmp_path):
        csv_path = tmp_path / "countries.csv"
        csv_path.write_text(
            "country_code,country_description,macroarea_id,continent_id\n"
            " ITA , Italy ,12, 1\n"
            "\n"
            "NAM,Namibia,27,3\n",
            encoding="utf-8",
        )

        countries = load_countries_from_csv(csv_path)

        assert countries[0] == Country("ITA", "Italy", 12, 1, 42.0, 13.0)
        assert countries[1].code == "NAM"

    def test_row_without_region_id_fails(self, tmp_path):
        csv_path = tmp_path / "countries.csv"
        csv_path.write_text(
            "country_code,country_description,macroarea_id,continent_id\n"
            "ITA,Italy,,1\n",
            encoding="utf-8",
        )

        with pytest.raises(ValueError, match="line 2"):
            load_countries_from_csv(csv_path)


class TestLoadGlobeData:
    """Tests for theme globe files."""

    def test_loads_theme_file(self, data_root):
        write_globe("BS-globe.json", SAMPLE_GLOBE)

        data = load_globe_data("borderscapes")

        assert data["metadata"]["title"] == "Borderscapes"
        assert len(data["points"]) == 3

    def test_missing_file_raises(self, data_root):
        with pytest.raises(DataUnavailable, match="wildrealms"):
            load_globe_data("wildrealms")

    def test_corrupt_file_raises(self, data_root):
        (paths.GLOBE_DATA_DIR / "LT-globe.json").write_text("[1, 2", encoding="utf-8")

        with pytest.raises(DataUnavailable):
            load_globe_data("livingtraditions")
